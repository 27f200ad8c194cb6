from . import comment_store
from . import service
from .application import Application
from .context import C

__all__ = [
    "Application",
    "C",
    "comment_store",
    "service",
]
