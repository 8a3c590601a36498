"""Custom exceptions for the TCP generator."""


class TCPGenError(Exception):
    """Base exception class for generator errors.

    Attributes:
        code (str): Error code for identifying the error type
        message (str): Descriptive error message
        details (dict): Additional error context and details
    """

    def __init__(self, message: str, code: str = "TCPGEN_ERR", details: dict | None = None):
        """Initialize the base generator error.

        Args:
            message: Human-readable error description
            code: Error code for identification and handling
            details: Additional context about the error
        """
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        """Format the error message with code and details."""
        error_msg = f"[{self.code}] {self.message}"
        if self.details:
            error_msg += f"\nDetails: {self.details}"
        return error_msg


# Catalog Load Exceptions
class CatalogLoadError(TCPGenError):
    """Raised when the word-list tree cannot be turned into a catalog.

    Loading is all-or-nothing: one unreadable file aborts the whole load and
    no partial catalog is ever returned.
    """

    def __init__(self, path: str, reason: str = "", details: dict | None = None):
        """Initialize catalog load error.

        Args:
            path: File or directory that could not be read
            reason: Underlying failure description
            details: Additional context about the failure
        """
        message = f"Couldn't read {path!r}"
        if reason:
            message += f": {reason}"
        self.path = path
        super().__init__(message, code="CATALOG_READ", details=details)


# Generation Exceptions
class GenerationError(TCPGenError):
    """Base exception class for failures while sampling a descriptor."""

    def __init__(self, message: str, code: str = "GEN_ERR", details: dict | None = None):
        super().__init__(message, code=code, details=details)


class PoolExhaustedError(GenerationError):
    """Raised when more distinct picks are requested than a pool holds.

    Covers both a category scratch pool running dry during type selection and
    a flat list (conditions, modifiers, anomalies) that is smaller than the
    rolled count. There is no clamping or reselection.
    """

    def __init__(self, pool: str, requested: int, available: int, details: dict | None = None):
        """Initialize pool exhausted error.

        Args:
            pool: Name of the exhausted pool (category name or list name)
            requested: Number of picks requested from the pool
            available: Number of distinct elements that were left
        """
        message = f"Pool '{pool}' exhausted: requested {requested}, {available} available"
        self.pool = pool
        self.requested = requested
        self.available = available
        super().__init__(message, code="POOL_EXHAUSTED", details=details)


class EmptyCatalogError(GenerationError):
    """Raised when generating from a catalog that has no categories at all."""

    def __init__(self, details: dict | None = None):
        super().__init__("Catalog has no categories to draw from", code="EMPTY_CATALOG", details=details)
