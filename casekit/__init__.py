from .core import Application
from .core.enumeration import CaseStyle
from .core.utils import InvalidArgumentError, convert_case, split_words, to_camel_case, to_dot_case, to_kebab_case

__version__ = "0.1.0"

__all__ = [
    "Application",
    "CaseStyle",
    "InvalidArgumentError",
    "convert_case",
    "split_words",
    "to_camel_case",
    "to_dot_case",
    "to_kebab_case",
]
