import pytest

from casekit.core.enumeration import CaseStyle
from casekit.core.utils import (
    CASE_CONVERTERS,
    InvalidArgumentError,
    convert_case,
    split_words,
    to_camel_case,
    to_dot_case,
    to_kebab_case,
)

CONVERTERS = [to_camel_case, to_kebab_case, to_dot_case]


def test_camel_case():
    assert to_camel_case("hello world") == "helloWorld"
    assert to_camel_case(" multiple words_here-now ") == "multipleWordsHereNow"
    assert to_camel_case("convert-this_string") == "convertThisString"
    assert to_camel_case("hello") == "hello"


def test_camel_case_keeps_original_casing():
    assert to_camel_case("helloWorld") == "helloWorld"
    assert to_camel_case("Hello WORLD") == "HelloWORLD"
    assert to_camel_case("hello wORLD") == "helloWORLD"


def test_dot_case():
    assert to_dot_case("hello world") == "hello.world"
    assert to_dot_case(" multiple words_here-now ") == "multiple.words.here.now"
    assert to_dot_case("Hello") == "hello"


def test_kebab_case():
    assert to_kebab_case("hello world") == "hello-world"
    assert to_kebab_case("  Hello__World--again  ") == "hello-world-again"
    assert to_kebab_case("HELLO") == "hello"


@pytest.mark.parametrize("converter", CONVERTERS)
@pytest.mark.parametrize("content", ["", "   ", "\t\n", "-_- _"])
def test_empty_input(converter, content):
    assert converter(content) == ""


def test_split_words():
    assert split_words("") == []
    assert split_words("hello") == ["hello"]
    assert split_words("  hello \t world\n") == ["hello", "world"]
    assert split_words("_leading-and-trailing_") == ["leading", "and", "trailing"]


def test_separator_style_does_not_change_words():
    expected = ["alpha", "beta", "gamma"]
    for content in ["alpha beta gamma", "alpha-beta-gamma", "alpha_beta_gamma", "alpha _-beta---gamma", " alpha  beta__gamma "]:
        assert split_words(content) == expected
        assert to_camel_case(content) == "alphaBetaGamma"
        assert to_kebab_case(content) == "alpha-beta-gamma"
        assert to_dot_case(content) == "alpha.beta.gamma"


@pytest.mark.parametrize("converter", CONVERTERS + [split_words])
def test_none_is_rejected(converter):
    with pytest.raises(InvalidArgumentError, match="cannot be None"):
        converter(None)


@pytest.mark.parametrize("converter", CONVERTERS)
@pytest.mark.parametrize("content, type_name", [(42, "int"), (4.2, "float"), (["a"], "list"), (b"a b", "bytes")])
def test_non_string_is_rejected(converter, content, type_name):
    with pytest.raises(InvalidArgumentError) as exc_info:
        converter(content)

    assert f"Received type: {type_name}" in str(exc_info.value)
    assert isinstance(exc_info.value, TypeError)


def test_convert_case_dispatch():
    assert convert_case("hello world", CaseStyle.CAMEL) == "helloWorld"
    assert convert_case("hello world", "kebab") == "hello-world"
    assert convert_case("hello world", "dot") == "hello.world"
    assert set(CASE_CONVERTERS) == set(CaseStyle)


def test_convert_case_unknown_style():
    with pytest.raises(ValueError, match="unsupported case style"):
        convert_case("hello world", "snake")
