"""Error taxonomy for the query pipeline and history store."""


class CitycastError(Exception):
    """Base for all classified failures. HTTP layer maps status_code."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInputError(CitycastError):
    status_code = 400


class ConfigurationError(CitycastError):
    """Provider base URL or API key is missing."""


class TransportError(CitycastError):
    """Raised when the provider call fails at the HTTP or network level."""

    status_code = 502

    def __init__(self, message: str, provider_status: int | None = None):
        super().__init__(message)
        self.provider_status = provider_status


class NoMatchError(CitycastError):
    status_code = 404


class MalformedPayloadError(CitycastError):
    status_code = 502


class StoreUnavailableError(CitycastError):
    """History file is missing, unreadable or corrupt."""


class StorePersistError(CitycastError):
    """History file could not be written."""
