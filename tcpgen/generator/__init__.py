from .taxonomy import Category, Tier  # noqa: F401
from .catalog_loader import Catalog, load_catalog  # noqa: F401
from .descriptor import Descriptor, TieredName, TypePair, asset_filename  # noqa: F401
from .random_entrypoint import generate, generate_many  # noqa: F401

__all__ = [
    'Category', 'Tier',
    'Catalog', 'load_catalog',
    'Descriptor', 'TieredName', 'TypePair', 'asset_filename',
    'generate', 'generate_many',
]
