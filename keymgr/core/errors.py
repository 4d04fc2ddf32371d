"""Error taxonomy for key-manager token handling."""


class KeyManagerError(Exception):
    """Base class for all key-manager domain failures."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class MalformedInputError(KeyManagerError):
    """JSON text was present but could not be read as an object."""


class InvalidNumericFieldError(KeyManagerError):
    """A field expected to hold a decimal integer was not numeric."""

    def __init__(self, field: str, value: object) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Field '{field}' is not a valid integer: {value!r}")


class MissingCredentialsError(KeyManagerError):
    """An OAuth application lacks its client id or client secret."""

    def __init__(self, message: str = "Consumer key or Consumer Secret missing.") -> None:
        super().__init__(message)


class ClaimsParseError(KeyManagerError):
    """A token that looked like a compact JWT could not be parsed."""

    def __init__(self, message: str = "Error while parsing jwt") -> None:
        super().__init__(message)


class ConfigurationError(KeyManagerError):
    """Key-manager configuration holds a value of the wrong shape."""
