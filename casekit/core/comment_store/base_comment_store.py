from abc import ABC, abstractmethod
from typing import List

from ..schema import Comment


class BaseCommentStore(ABC):
    """Abstract base class for comment document stores.

    Concrete stores keep `Comment` records of a single collection and register
    themselves on the service context with `@C.register_comment_store(name)`.

    Attributes:
        collection_name: Name of the collection the store operates on.
        kwargs: Additional keyword arguments for subclass-specific configuration.
    """

    def __init__(self, collection_name: str = "comments", **kwargs):
        self.collection_name: str = collection_name
        self.kwargs: dict = kwargs

    @staticmethod
    def _sort_newest_first(comments: List[Comment], limit: int | None = None) -> List[Comment]:
        comments = sorted(comments, key=lambda x: x.created_at, reverse=True)
        if limit is not None:
            comments = comments[:limit]
        return comments

    @abstractmethod
    async def insert(self, comments: Comment | List[Comment]):
        """Insert one or more comments, replacing any record with the same comment_id.

        Args:
            comments: A single Comment or a list of Comments.
        """

    @abstractmethod
    async def get(self, comment_id: str) -> Comment | None:
        """Fetch one comment by id, or None when it does not exist."""

    @abstractmethod
    async def list(self, limit: int | None = None) -> List[Comment]:
        """List comments ordered by creation time, newest first.

        Args:
            limit: Optional maximum number of comments to return.

        Returns:
            A list of Comments.
        """

    @abstractmethod
    async def delete(self, comment_id: str) -> bool:
        """Delete a comment by id.

        Returns:
            True if a comment existed and was removed, False otherwise.
        """

    async def close(self):
        """Release any resources held by the store."""
