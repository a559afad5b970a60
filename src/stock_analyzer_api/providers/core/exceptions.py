"""Typed errors raised by upstream providers."""


class ProviderError(Exception):
    """Base class for failures talking to an upstream provider."""


class NotFoundError(ProviderError):
    """Upstream answered 404 or returned no primary payload."""


class UpstreamError(ProviderError):
    """Upstream was unreachable, answered non-2xx, or returned an unusable body."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code

    def __str__(self) -> str:
        base = super().__str__()
        if self.status_code is None:
            return base
        return f"{base} (status {self.status_code})"
