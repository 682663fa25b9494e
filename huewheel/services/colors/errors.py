"""
Strict-mode input errors.

The default pipeline never raises these; they are only surfaced when a
caller opts into strict validation.
"""


class InvalidInputError(ValueError):
    """Base class for rejected palette inputs."""

    def __init__(self, value, message: str):
        super().__init__(message)
        self.value = value


class InvalidColorError(InvalidInputError):
    """Raised when a color string is not #RRGGBB / RRGGBB."""

    def __init__(self, value):
        super().__init__(value, f"Invalid hex color: {value!r}. Expected #RRGGBB")


class InvalidSchemeError(InvalidInputError):
    """Raised when a scheme identifier is not recognized."""

    def __init__(self, value, valid_schemes=None):
        detail = f"Invalid scheme: {value!r}"
        if valid_schemes:
            detail += f". Valid options: {list(valid_schemes)}"
        super().__init__(value, detail)
