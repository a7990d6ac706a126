"""Use cases for managing replies."""

from .delete_reply import delete_reply
from .write_reply import write_reply

__all__ = ["delete_reply", "write_reply"]
