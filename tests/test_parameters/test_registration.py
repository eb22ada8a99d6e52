import pytest

from clparams import Parameter, ParameterName, Parameters
from clparams.exceptions import (
    ActionAlreadyExistsError,
    InvalidActionError,
    InvalidParameterNameError,
    ParameterAlreadyExistsError,
    ParameterError,
)


def test_register_parameter_returns_slot():
    table = Parameters()
    slot = Parameter(max_arity=3, description="Files")
    assert table.register_parameter(ParameterName("file", "f"), slot) is slot
    assert table.slot_for("file") is slot
    assert table.slot_for_short("f") is slot
    assert table.slot_for(ParameterName("file")) is slot


def test_register_parameter_default_slot():
    table = Parameters()
    slot = table.register_parameter("output")
    assert slot.max_arity == 1
    assert table.lookup_by_long("output") == ParameterName("output")


def test_register_parameter_rejects_bad_types():
    table = Parameters()
    with pytest.raises(ParameterError):
        table.register_parameter(42)
    with pytest.raises(ParameterError):
        table.register_parameter("output", ["not", "a", "slot"])


def test_duplicate_long_name():
    table = Parameters()
    table.add_parameter("output", "o")
    with pytest.raises(ParameterAlreadyExistsError):
        table.add_parameter("output", "x")


def test_duplicate_short_name():
    table = Parameters()
    table.add_parameter("output", "o")
    with pytest.raises(ParameterAlreadyExistsError):
        table.add_parameter("offset", "o")
    assert "offset" not in table


def test_lookups():
    table = Parameters()
    table.add_parameter("output", "o")
    table.add_parameter("verbose")
    assert table.lookup_by_long("output").short_name == "o"
    assert table.lookup_by_short("o").long_name == "output"
    assert table.lookup_by_long("missing") is None
    assert table.lookup_by_short("z") is None
    assert table.slot_for("missing") is None
    assert table.slot_for_short("z") is None


def test_lookup_by_empty_short_name_fails_fast():
    table = Parameters()
    with pytest.raises(InvalidParameterNameError):
        table.lookup_by_short("")
    with pytest.raises(InvalidParameterNameError):
        table.contains_short("")


def test_contains():
    table = Parameters()
    table.add_parameter("output", "o")
    assert "output" in table
    assert ParameterName("output") in table
    assert "o" not in table
    assert 42 not in table
    assert table.contains_long("output")
    assert table.contains_short("o")
    assert not table.contains_short("x")


def test_name_for():
    table = Parameters()
    slot = table.add_parameter("output", "o")
    assert table.name_for(slot) == ParameterName("output")
    assert table.name_for(Parameter()) is None


def test_parameters_view_is_ordered_copy():
    table = Parameters()
    for long_name in ("zeta", "alpha", "mid"):
        table.add_parameter(long_name)
    view = table.parameters
    assert [name.long_name for name in view] == ["zeta", "alpha", "mid"]
    view.clear()
    assert len(table.parameters) == 3


def test_register_action_variants():
    def build(parameters):
        """Build things."""

    table = Parameters()
    table.register_action("build", build)
    action = table.add_action("clean", "Clean things", lambda parameters: None)
    assert table.actions["build"].description == "Build things."
    assert table.actions["clean"] is action
    assert list(table.actions) == ["build", "clean"]


def test_duplicate_action():
    table = Parameters()
    table.add_action("build", "Build", print)
    with pytest.raises(ActionAlreadyExistsError):
        table.add_action("build", "Again", print)


@pytest.mark.parametrize("key", ["", "--build", "-b", None])
def test_invalid_action_key(key):
    table = Parameters()
    with pytest.raises(InvalidActionError):
        table.register_action(key, print)


def test_invalid_action_object():
    table = Parameters()
    with pytest.raises(InvalidActionError):
        table.register_action("build", "not callable")


def test_set_action_and_reset():
    table = Parameters()
    table.add_parameter("output", "o")
    table.parse(["build", "-o", "a", "b"])
    assert table.selected_action == "build"

    table.reset()
    assert table.selected_action == ""
    assert table.positionals == []
    assert table.slot_for("output").values == []
    assert not table.slot_for("output").present
    assert "output" in table

    table.set_action("clean")
    assert table.selected_action == "clean"


def test_description_none():
    assert Parameters(None).description == ""


def test_str_and_repr():
    table = Parameters()
    table.add_parameter("output", "o")
    table.add_parameter("verbose", "v", max_arity=0)
    table.add_parameter("quiet", "q")
    table.parse(["build", "-o", "file", "-v", "extra"])
    assert str(table) == "{output=[file], verbose=[], quiet=false}"
    assert repr(table) == (
        "Parameters(parameters=3, actions=0, positionals=1, selected_action='build')"
    )


def test_injected_logger(caplog):
    import logging

    custom = logging.getLogger("tests.custom")
    table = Parameters(logger=custom)
    caplog.set_level(logging.DEBUG, logger="tests.custom")
    table.add_parameter("output")
    table.parse(["build", "--output", "x"])
    assert all(record.name == "tests.custom" for record in caplog.records)
    assert "Parameters: {output=[x]}" in caplog.text
