"""Custom exceptions for eureblog."""


class EureblogError(Exception):
    """Base exception for eureblog operations."""


class RenderError(EureblogError):
    """Error that aborts rendering of a whole document."""


class DuplicateSectionIdError(RenderError):
    """A section key appears more than once in a document."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Duplicate section id: {key!r}")


class MarkOptionsError(RenderError):
    """Mark options that cannot be applied to a text leaf."""


class HighlightError(EureblogError):
    """Error during syntax highlighting."""
