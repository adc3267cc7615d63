"""Error taxonomy for the SNCF tools."""


class SncfError(Exception):
    """Base exception for all SNCF tool errors."""


class ConfigurationError(SncfError):
    """Raised when required process configuration is missing or invalid."""


class PlaceNotFoundError(SncfError):
    """Raised when a place name does not resolve to any stop area."""

    def __init__(self, place: str) -> None:
        self.place = place
        super().__init__(f"no stop area found for {place}")


class SncfApiError(SncfError):
    """Raised when the SNCF API answers with a non-success HTTP status."""

    def __init__(self, status_code: int, message: str = "") -> None:
        self.status_code = status_code
        super().__init__(message or f"SNCF API returned status {status_code}")
