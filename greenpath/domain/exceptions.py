"""Domain semantic exceptions."""


class DomainError(Exception):
    """Base domain exception."""


class InvalidArgument(DomainError, ValueError):
    """Raised when a caller passes a value outside an operation's contract."""


class UnknownOptionError(DomainError, KeyError):
    """Raised when an option id is not present in the catalog."""

    def __init__(self, kind: str, option_id: str):
        self.kind = kind
        self.option_id = option_id
        super().__init__(f"unknown {kind} option: {option_id}")

    def __str__(self) -> str:
        return self.args[0]


class CatalogError(DomainError):
    """Raised when catalog data cannot be loaded or fails validation."""
