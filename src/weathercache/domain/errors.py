from __future__ import annotations


class WeatherError(RuntimeError):
    """Raised when a history request cannot be completed by the provider."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WeatherError):
            return NotImplemented
        return type(self) is type(other) and self.message == other.message

    def __hash__(self) -> int:
        return hash((type(self), self.message))


class AuthorizationError(WeatherError):
    """Raised when the provider rejects the configured API key."""

    def __init__(self, message: str = "Check your API key") -> None:
        super().__init__(message)


class InternalError(WeatherError):
    """Raised when the provider answers with an error payload."""


class ParseError(WeatherError):
    """Raised when a provider response cannot be decoded."""


class HttpError(WeatherError):
    """Raised on non-authorization HTTP failures and unreachable hosts."""


class RequestTimeoutError(WeatherError):
    """Raised when the provider does not answer within the configured timeout."""


class InvalidConfigurationError(ValueError):
    """Raised when a client cannot be built from the supplied configuration."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
