from .case_convert import (
    CASE_CONVERTERS,
    InvalidArgumentError,
    convert_case,
    split_words,
    to_camel_case,
    to_dot_case,
    to_kebab_case,
)
from .logger_utils import init_logger
from .pydantic_config_parser import PydanticConfigParser
from .singleton import singleton

__all__ = [
    "CASE_CONVERTERS",
    "InvalidArgumentError",
    "convert_case",
    "split_words",
    "to_camel_case",
    "to_dot_case",
    "to_kebab_case",
    "init_logger",
    "PydanticConfigParser",
    "singleton",
]
