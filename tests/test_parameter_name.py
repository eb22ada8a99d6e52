import pytest

from clparams.exceptions import InvalidParameterNameError
from clparams.parameter_name import ParameterName


def test_equality_uses_long_name_only():
    assert ParameterName("verbose", "v") == ParameterName("verbose", "x")
    assert ParameterName("verbose") == ParameterName("verbose", "v")
    assert ParameterName("verbose", "v") != ParameterName("quiet", "v")


def test_hash_uses_long_name_only():
    names = {ParameterName("verbose", "v"), ParameterName("verbose")}
    assert len(names) == 1
    assert hash(ParameterName("verbose", "v")) == hash("verbose")


def test_equal_to_long_name_string():
    assert ParameterName("output", "o") == "output"
    assert ParameterName("output", "o") != "o"


def test_has_short():
    assert ParameterName("output", "o").has_short()
    assert not ParameterName("output").has_short()


def test_str_is_long_name():
    assert str(ParameterName("output", "o")) == "output"


def test_immutable():
    name = ParameterName("output", "o")
    with pytest.raises(AttributeError):
        name.long_name = "other"


@pytest.mark.parametrize("long_name", ["", "two words", "--output", "-o", "tab\there"])
def test_invalid_long_name(long_name):
    with pytest.raises(InvalidParameterNameError):
        ParameterName(long_name)


@pytest.mark.parametrize("short_name", ["", "ab", " ", "-", "\t"])
def test_invalid_short_name(short_name):
    with pytest.raises(InvalidParameterNameError):
        ParameterName("output", short_name)
