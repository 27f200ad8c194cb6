from .base_context import BaseContext
from .registry import Registry
from .service_context import C, ServiceContext

__all__ = [
    "BaseContext",
    "Registry",
    "C",
    "ServiceContext",
]
