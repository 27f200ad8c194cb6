from .base_comment_store import BaseCommentStore
from .local_comment_store import LocalCommentStore
from .memory_comment_store import MemoryCommentStore

__all__ = [
    "BaseCommentStore",
    "LocalCommentStore",
    "MemoryCommentStore",
]
