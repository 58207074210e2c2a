"""Error types shared by the scanner and the document adapter."""


class CascadeLensError(Exception):
    """Base class for cascadelens errors."""


class SelectorError(CascadeLensError):
    """Raised by a host element when it cannot evaluate a selector."""

    def __init__(self, selector: str, reason: str = "") -> None:
        self.selector = selector
        self.reason = reason
        message = f"Invalid selector {selector!r}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class SheetAccessError(CascadeLensError):
    """Raised when the rules of a stylesheet cannot be read."""

    def __init__(self, label: str, reason: str = "") -> None:
        self.label = label
        self.reason = reason
        message = f"Stylesheet {label!r} is not readable"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class DocumentError(CascadeLensError):
    """Raised when a host document cannot be loaded or queried."""
