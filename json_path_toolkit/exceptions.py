"""Custom exceptions for the JSON path toolkit."""


class ToolkitError(Exception):
    """Base exception for all toolkit errors."""

    pass


class InvalidArgumentError(ToolkitError, ValueError):
    """Raised when a required string argument is missing or blank."""

    pass


class DocumentNotFoundError(ToolkitError, FileNotFoundError):
    """Raised when a JSON document does not exist on disk."""

    pass


class DocumentParseError(ToolkitError, ValueError):
    """Raised when a document is not well-formed JSON."""

    pass


class SelectorError(ToolkitError, ValueError):
    """Raised when a selector cannot be parsed."""

    pass


class ValueNotFoundError(ToolkitError, KeyError):
    """Raised when a selector matches nothing in a document."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""
