"""Error taxonomy for beach lookups and upstream weather payloads."""


class BeachwatchError(Exception):
    """Base class for all request-scoped beachwatch failures."""


class NotFoundError(BeachwatchError):
    """Raised when a beach name does not resolve to a known location."""

    def __init__(self, name: str, valid_keys: list[str]):
        self.name = name
        self.valid_keys = list(valid_keys)
        super().__init__(
            f'Beach "{name}" not found. '
            f"Available beaches: {', '.join(self.valid_keys)}"
        )


class MalformedPayloadError(BeachwatchError):
    """Raised when a provider payload lacks a required field or has a bad value."""

    def __init__(self, path: str, reason: str = "missing"):
        self.path = path
        self.field = path.rsplit(".", 1)[-1]
        self.reason = reason
        super().__init__(f"Malformed weather payload: {path} is {reason}")


class UpstreamUnavailableError(BeachwatchError):
    """Raised when the observation provider could not deliver a payload."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
