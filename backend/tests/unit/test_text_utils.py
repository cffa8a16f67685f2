import pytest

from hinglish.utils.text import is_translatable_text


@pytest.mark.parametrize("text", ["", "5", "42", "{a:1}", "[1,2]", "a"])
def test_rejects_untranslatable_text(text):
    assert not is_translatable_text(text)


@pytest.mark.parametrize(
    "text", ["Hello there", "ok", "42 apples", "{unclosed", "[note] inline", "42\n", "\u0664\u0662"]
)
def test_accepts_regular_text(text):
    assert is_translatable_text(text)
