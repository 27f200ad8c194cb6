"""Case converter for string naming conventions."""

import re
from typing import Any, Callable, Dict, List

from ..enumeration import CaseStyle

# Runs of whitespace, hyphens and underscores all count as one word boundary
_SEPARATOR_PATTERN = re.compile(r"[\s\-_]+")


class InvalidArgumentError(TypeError):
    """Raised when a case converter receives something other than a string."""


def _validate(content: Any) -> str:
    if content is None:
        raise InvalidArgumentError("Input cannot be None.")
    if not isinstance(content, str):
        raise InvalidArgumentError(f"Input must be a string. Received type: {type(content).__name__}")
    return content


def split_words(content: str) -> List[str]:
    """Split a string into words on spaces, hyphens and underscores.

    Args:
        content: Free-form text.

    Returns:
        The non-empty words in order. Empty or separator-only input gives an empty list.

    Examples:
        >>> split_words("hello_world-again")
        ['hello', 'world', 'again']
        >>> split_words("   ")
        []
    """
    content = _validate(content).strip()
    return [word for word in _SEPARATOR_PATTERN.split(content) if word]


def to_camel_case(content: str) -> str:
    """Convert a string to camelCase.

    The first word is kept as-is, every following word gets its first character
    upper-cased. A single word is returned unchanged.

    Examples:
        >>> to_camel_case("hello world")
        'helloWorld'
        >>> to_camel_case(" multiple words_here-now ")
        'multipleWordsHereNow'
    """
    words = split_words(content)
    if not words:
        return ""

    return words[0] + "".join(word[0].upper() + word[1:] for word in words[1:])


def to_kebab_case(content: str) -> str:
    """Convert a string to kebab-case.

    Examples:
        >>> to_kebab_case("  Hello__World--again  ")
        'hello-world-again'
    """
    # lower() runs on the joined string, not per word
    return "-".join(split_words(content)).lower()


def to_dot_case(content: str) -> str:
    """Convert a string to dot.case.

    Examples:
        >>> to_dot_case(" multiple words_here-now ")
        'multiple.words.here.now'
    """
    return ".".join(word.lower() for word in split_words(content))


CASE_CONVERTERS: Dict[CaseStyle, Callable[[str], str]] = {
    CaseStyle.CAMEL: to_camel_case,
    CaseStyle.KEBAB: to_kebab_case,
    CaseStyle.DOT: to_dot_case,
}


def convert_case(content: str, style: CaseStyle | str) -> str:
    try:
        style = CaseStyle(style)
    except ValueError:
        raise ValueError(f"unsupported case style={style}, choose from {[s.value for s in CaseStyle]}")

    return CASE_CONVERTERS[style](content)
