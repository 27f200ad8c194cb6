from .base_service import BaseService
from .cmd_service import CmdService
from .http_service import HttpService

__all__ = [
    "BaseService",
    "CmdService",
    "HttpService",
]
