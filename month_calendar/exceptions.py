class InvalidArgumentError(ValueError):
    """Raised for calendar input outside of the supported range."""


class StylesheetError(OSError):
    """Raised when the stylesheet for a render cannot be read."""
