import pytest

from clparams.parameters import Parameters
from clparams.tokenizer import is_parameter_token


@pytest.mark.parametrize(
    "token",
    ["-v", "--verbose", "-abc", "--dry-run", "-5", "--", "---x", "--a=b"],
)
def test_parameter_shaped(token):
    assert is_parameter_token(token)


@pytest.mark.parametrize(
    "token",
    ["", "-", "build", "a-b", "- v", "-a b", "--two words", "--trailing ", " -v"],
)
def test_not_parameter_shaped(token):
    assert not is_parameter_token(token)


def test_caret_is_not_special():
    """A literal caret after the hyphens is just another non-whitespace character."""
    assert is_parameter_token("-^")
    assert is_parameter_token("--^s")
    assert not is_parameter_token("-^ s")


def test_table_delegates():
    assert Parameters().is_parameter_token("--verbose")
    assert not Parameters().is_parameter_token("build")
