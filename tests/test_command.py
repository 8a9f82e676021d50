import pytest

from appenv.errors import ParseError
from appenv.runtime.command import CommandInput


def test_from_arguments_splits_executable_path():
    command_input = CommandInput.from_arguments(["prog", "a", "b"])

    assert command_input.executable_path == ["prog"]
    assert command_input.arguments == ["a", "b"]
    assert command_input.all_arguments() == ["prog", "a", "b"]


def test_from_empty_arguments():
    command_input = CommandInput.from_arguments([])

    assert command_input.executable_path == []
    assert command_input.arguments == []


def test_parse_option_consumes_value():
    command_input = CommandInput.from_arguments(["prog", "serve", "--log", "debug", "--port", "80"])

    assert command_input.parse_option("log") == "debug"
    assert command_input.arguments == ["serve", "--port", "80"]


def test_parse_option_absent_leaves_tokens():
    command_input = CommandInput.from_arguments(["prog", "serve", "--port", "80"])

    assert command_input.parse_option("env", short="e") is None
    assert command_input.arguments == ["serve", "--port", "80"]


def test_parse_option_last_value_wins():
    command_input = CommandInput.from_arguments(["prog", "--env", "dev", "-e", "prod"])

    assert command_input.parse_option("env", short="e") == "prod"
    assert command_input.arguments == []


def test_parse_option_does_not_match_longer_names():
    command_input = CommandInput.from_arguments(["prog", "--env-file", "x.env"])

    assert command_input.parse_option("env", short="e") is None
    assert command_input.arguments == ["--env-file", "x.env"]


def test_parse_option_missing_value_raises():
    command_input = CommandInput.from_arguments(["prog", "serve", "-e"])

    with pytest.raises(ParseError):
        command_input.parse_option("env", short="e")


def test_parse_error_is_value_error():
    assert issubclass(ParseError, ValueError)


def test_parse_option_only_matches_exact_short_token():
    command_input = CommandInput.from_arguments(["prog", "-env", "production", "-e=dev", "-edev"])

    assert command_input.parse_option("env", short="e") is None
    assert command_input.arguments == ["-env", "production", "-e=dev", "-edev"]


def test_parse_option_short_followed_by_attached_form_raises():
    command_input = CommandInput.from_arguments(["prog", "-e", "-env"])

    with pytest.raises(ParseError):
        command_input.parse_option("env", short="e")


def test_parse_option_stops_at_double_dash():
    command_input = CommandInput.from_arguments(["prog", "-e", "prod", "--", "-e", "dev"])

    assert command_input.parse_option("env", short="e") == "prod"
    assert command_input.arguments == ["--", "-e", "dev"]
