from .auth import Token
from .member import MemberCreate, MemberRead
from .post import PostPageRead, PostRead, PostSummaryRead, PostWriteRead
from .reply import ReplyCreate, ReplyRead

__all__ = [
    "MemberCreate",
    "MemberRead",
    "PostPageRead",
    "PostRead",
    "PostSummaryRead",
    "PostWriteRead",
    "ReplyCreate",
    "ReplyRead",
    "Token",
]
