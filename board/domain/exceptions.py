"""Errors raised by use cases and translated into HTTP responses by the API."""


class NotFoundError(LookupError):
    """A referenced post, reply or member does not exist."""


class AuthorizationError(PermissionError):
    """The acting member does not own the resource being changed."""


__all__ = ["AuthorizationError", "NotFoundError"]
