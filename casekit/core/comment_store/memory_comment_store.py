from typing import Dict, List

from loguru import logger

from .base_comment_store import BaseCommentStore
from ..context import C
from ..schema import Comment


@C.register_comment_store("memory")
class MemoryCommentStore(BaseCommentStore):
    """In-process comment store backed by a dict keyed by comment_id."""

    def __init__(self, collection_name: str = "comments", **kwargs):
        super().__init__(collection_name=collection_name, **kwargs)
        self._comments: Dict[str, Comment] = {}

    async def insert(self, comments: Comment | List[Comment]):
        if isinstance(comments, Comment):
            comments = [comments]

        for comment in comments:
            self._comments[comment.comment_id] = comment
        logger.info(f"Inserted {len(comments)} comments into {self.collection_name}")

    async def get(self, comment_id: str) -> Comment | None:
        return self._comments.get(comment_id)

    async def list(self, limit: int | None = None) -> List[Comment]:
        return self._sort_newest_first(list(self._comments.values()), limit)

    async def delete(self, comment_id: str) -> bool:
        if self._comments.pop(comment_id, None) is None:
            logger.warning(f"Comment {comment_id} does not exist in {self.collection_name}")
            return False

        logger.info(f"Deleted comment {comment_id} from {self.collection_name}")
        return True
