from .comment import Comment
from .request import ConvertRequest
from .response import Response
from .service_config import (
    CmdConfig,
    CommentStoreConfig,
    HttpConfig,
    LogConfig,
    ServiceConfig,
)

__all__ = [
    "Comment",
    # Request/Response
    "ConvertRequest",
    "Response",
    # Service config
    "CmdConfig",
    "CommentStoreConfig",
    "HttpConfig",
    "LogConfig",
    "ServiceConfig",
]
