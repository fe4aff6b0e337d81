"""SecureForm exception hierarchy."""

from __future__ import annotations


class SecureFormError(Exception):
    """Base exception for all SecureForm errors."""


class InvalidDestinationError(SecureFormError, TypeError):
    """Destination is not a mutable dataclass or pydantic model instance."""

    def __init__(self, message: str = "Invalid destination, expected a mutable record instance") -> None:
        super().__init__(message)


class UnsupportedFieldKindError(SecureFormError, TypeError):
    """Member annotation is outside the supported set of kinds."""

    def __init__(self, annotation: object) -> None:
        self.annotation = annotation
        super().__init__(
            f"Invalid field kind {annotation!r}, expected str, bool, int, float, "
            "a Settable type or UploadFile"
        )


class TagSyntaxError(SecureFormError, ValueError):
    """Malformed option encoding in a form tag."""


class NumericParseError(SecureFormError, ValueError):
    """Malformed or out-of-range numeric literal for the target width."""

    def __init__(self, literal: str, reason: str) -> None:
        self.literal = literal
        self.reason = reason
        super().__init__(f"parsing {literal!r}: {reason}")


class BoundError(SecureFormError, ValueError):
    """Value or string length falls outside a min/max bound."""


class BoundBelowMinimumError(BoundError):
    """Result falls below minimum range."""

    def __init__(self, message: str = "Result falls below minimum range") -> None:
        super().__init__(message)


class BoundAboveMaximumError(BoundError):
    """Result falls above maximum range."""

    def __init__(self, message: str = "Result falls above maximum range") -> None:
        super().__init__(message)


class MissingFileError(SecureFormError):
    """No uploaded file for a file member."""

    def __init__(self, message: str = "no such file") -> None:
        super().__init__(message)


class CapabilityError(SecureFormError, ValueError):
    """Raised by Settable.set implementations that reject a raw value."""


class FieldError(SecureFormError):
    """An error that relates to a specific destination member."""

    def __init__(self, name: str, error: BaseException) -> None:
        self.name = name
        self.error = error
        super().__init__(f"Error parsing {name!r} form field: {error}")


class BodyTooLargeError(SecureFormError):
    """Request body exceeds the configured byte limit."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(f"Request body too large, limit is {limit} bytes")
