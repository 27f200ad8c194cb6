"""Local file system comment store.

Each collection is a directory under `root_path`, and each comment is stored as
an individual JSON file named by its comment_id.
"""

import json
from pathlib import Path
from typing import List

from loguru import logger

from .base_comment_store import BaseCommentStore
from ..context import C
from ..schema import Comment


@C.register_comment_store("local")
class LocalCommentStore(BaseCommentStore):

    def __init__(self, collection_name: str = "comments", root_path: str = "./local_comment_store", **kwargs):
        """Initialize the local comment store.

        Args:
            collection_name: Name of the collection (directory) to use.
            root_path: Root directory holding all collections.
            **kwargs: Additional configuration parameters.
        """
        super().__init__(collection_name=collection_name, **kwargs)
        self.root_path = Path(root_path)
        self.collection_path = self.root_path / collection_name
        self.collection_path.mkdir(parents=True, exist_ok=True)

    def _get_comment_file_path(self, comment_id: str) -> Path:
        return self.collection_path / f"{comment_id}.json"

    def _save_comment(self, comment: Comment):
        file_path = self._get_comment_file_path(comment.comment_id)
        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(comment.model_dump(mode="json"), f, ensure_ascii=False, indent=2)

    def _load_comment(self, file_path: Path) -> Comment:
        with open(file_path, "r", encoding="utf-8") as f:
            return Comment.model_validate(json.load(f))

    def _load_all_comments(self) -> List[Comment]:
        comments = []
        for file_path in self.collection_path.glob("*.json"):
            try:
                comments.append(self._load_comment(file_path))
            except (OSError, ValueError) as e:
                logger.warning(f"Failed to load comment from {file_path}: {e}")

        return comments

    async def insert(self, comments: Comment | List[Comment]):
        if isinstance(comments, Comment):
            comments = [comments]

        for comment in comments:
            self._save_comment(comment)
        logger.info(f"Inserted {len(comments)} comments into {self.collection_name}")

    async def get(self, comment_id: str) -> Comment | None:
        file_path = self._get_comment_file_path(comment_id)
        if not file_path.exists():
            return None

        try:
            return self._load_comment(file_path)
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to load comment from {file_path}: {e}")
            return None

    async def list(self, limit: int | None = None) -> List[Comment]:
        return self._sort_newest_first(self._load_all_comments(), limit)

    async def delete(self, comment_id: str) -> bool:
        file_path = self._get_comment_file_path(comment_id)
        if not file_path.exists():
            logger.warning(f"Comment {comment_id} does not exist in {self.collection_name}")
            return False

        file_path.unlink()
        logger.info(f"Deleted comment {comment_id} from {self.collection_name}")
        return True
