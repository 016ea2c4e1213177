"""Error taxonomy for the request pipeline."""


class ShowroomError(Exception):
    """Base class for all Showroom errors."""


class GenerationError(ShowroomError):
    """Content generation failed; the server must not start."""


class ResolveError(ShowroomError):
    """Content lookup for a request path failed."""

    def __init__(self, key: str, message: str) -> None:
        super().__init__(message)
        self.key = key


class ContentNotFoundError(ResolveError):
    """No content item exists for the key."""

    def __init__(self, key: str) -> None:
        super().__init__(key, f"No content for key: {key}")


class ContentFetchError(ResolveError):
    """The content store itself failed while looking up a key."""

    def __init__(self, key: str, cause: BaseException) -> None:
        super().__init__(key, f"Failed to fetch content for {key!r}: {cause}")
        self.cause = cause
