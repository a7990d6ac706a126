"""Use cases for managing members."""

from .authenticate_member import AuthenticationStatus, authenticate_member
from .create_member import create_member
from .get_member import get_member

__all__ = [
    "AuthenticationStatus",
    "authenticate_member",
    "create_member",
    "get_member",
]
