"""Aggregate application use cases."""

from .members import authenticate_member, create_member
from .posts import delete_post, update_post, write_post

__all__ = [
    "authenticate_member",
    "create_member",
    "delete_post",
    "update_post",
    "write_post",
]
