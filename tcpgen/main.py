"""Command-line entrypoint for the TCP generator.

Loads the word-list catalog once, then asks how many descriptors to print
until the user enters 0 (or anything that is not a number).
"""
from __future__ import annotations

# Standard library imports
import argparse
import random
import sys
from typing import Callable, List, Optional

# Local imports
from tcpgen import logging_util
from tcpgen.exceptions import TCPGenError
from tcpgen.generator import Catalog, Category, generate_many, load_catalog
from tcpgen.path_util import catalog_root_dir
from tcpgen.random_util import get_random

logger = logging_util.get_logger(__name__)

InputFunc = Callable[[str], str]
OutputFunc = Callable[[str], None]


def parse_count(text: str) -> int:
    """Parse a requested descriptor count; anything unusable means 0."""
    digits = str(text).strip()
    if digits.startswith("+"):
        digits = digits[1:]
    # ASCII digits only; int() would also take "1_000" or "３"
    if not (digits.isascii() and digits.isdigit()):
        return 0
    return int(digits)


def _welcome_lines(catalog: Catalog) -> List[str]:
    lines = []
    unknown = catalog.unknown_count()
    if Category.UNKNOWN in catalog.categories:
        lines.append(f"{unknown} types with an unknown category")
    lines.append(f"Welcome to the TCP random generator, there are {catalog.type_count()} types")
    return lines


def run_session(
    catalog: Catalog,
    rng: Optional[random.Random] = None,
    input_func: InputFunc = input,
    output_func: OutputFunc = print,
) -> int:
    """Run the interactive loop and return how many descriptors were printed."""
    rng = rng or get_random()
    for line in _welcome_lines(catalog):
        output_func(line)
    output_func("Please input how many you want to generate, 0 to exit")
    printed = 0
    while True:
        try:
            raw = input_func("")
        except (EOFError, KeyboardInterrupt):
            break
        count = parse_count(raw)
        if count == 0:
            break
        for descriptor in generate_many(catalog, count, rng):
            output_func(descriptor.render_text())
            printed += 1
        output_func("Would you like more TCPs? Input how many if so, 0 to exit")
    logger.info("session_finished printed=%s", printed)
    return printed


def _build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Random TCP descriptor generator")
    p.add_argument("--root", metavar="PATH", default=None,
                   help="Word-list root containing types/, conditions/, modifiers/, anomalies/ (default: TCPGEN_ROOT or .)")
    p.add_argument("--count", metavar="INT", type=int, default=None,
                   help="Print this many descriptors and exit instead of prompting")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_arg_parser().parse_args(argv)
    root = args.root or catalog_root_dir()
    try:
        catalog = load_catalog(root)
    except TCPGenError as e:
        logger.error(f"Failed loading catalog from {root}: {e}")
        return 1

    rng = get_random()
    if args.count is not None:
        for descriptor in generate_many(catalog, args.count, rng):
            print(descriptor.render_text())
        return 0

    run_session(catalog, rng)
    logger.info("Exiting application")
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
