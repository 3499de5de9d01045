import pytest

from phoenix.environment import Environment


@pytest.fixture
def environment():
    return Environment(["HOME=/home/user", "PATH=/bin:/usr/bin", "EMPTY"])


def test_parses_entries(environment):
    assert environment.get("HOME") == "/home/user"
    assert environment.get("PATH") == "/bin:/usr/bin"
    assert environment.get("EMPTY") is None
    assert "EMPTY" in environment
    assert len(environment) == 3


def test_value_containing_equals_kept_whole():
    environment = Environment(["A=b=c"])
    assert environment.get("A") == "b=c"


def test_mapping_entries():
    environment = Environment({"X": "1", "Y": None})
    assert list(environment) == ["X", "Y"]
    assert environment.get("X") == "1"


def test_set_existing_keeps_position(environment):
    environment.set("HOME", "/tmp")
    assert environment.get("HOME") == "/tmp"
    assert list(environment) == ["HOME", "PATH", "EMPTY"]


def test_set_new_appends(environment):
    environment.set("NEW", "value")
    assert list(environment)[-1] == "NEW"
    assert environment.get("NEW") == "value"


def test_set_none_keeps_existing_value(environment):
    environment.set("HOME", None)
    assert environment.get("HOME") == "/home/user"


def test_declare(environment):
    environment.declare("HOME")
    assert environment.get("HOME") == "/home/user"
    environment.declare("FRESH")
    assert "FRESH" in environment
    assert environment.get("FRESH") is None


def test_declare_with_equals_clears_value(environment):
    environment.declare("HOME=")
    assert "HOME" in environment
    assert environment.get("HOME") is None
    assert len(environment) == 3


def test_remove(environment):
    assert environment.remove("PATH") is True
    assert "PATH" not in environment
    assert environment.remove("PATH") is False
    assert list(environment) == ["HOME", "EMPTY"]


def test_env_lines_skip_valueless(environment):
    assert environment.env_lines() == ["HOME=/home/user", "PATH=/bin:/usr/bin"]


def test_export_lines(environment):
    assert environment.export_lines() == [
        'declare -x HOME="/home/user"',
        'declare -x PATH="/bin:/usr/bin"',
        'declare -x EMPTY=""',
    ]


def test_empty_environment():
    environment = Environment()
    assert len(environment) == 0
    assert environment.env_lines() == []
    assert environment.get("HOME") is None