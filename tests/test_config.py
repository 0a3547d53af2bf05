from __future__ import annotations

import pytest

from lotto649.config import DEFAULT_COUNT, load_settings, parse_count
from lotto649.errors import InvalidArgument


@pytest.mark.parametrize(
    "raw,expected",
    [
        (None, DEFAULT_COUNT),
        ("1", 1),
        ("10", 10),
        (" 7 ", 7),
    ],
)
def test_parse_count(raw: str | None, expected: int) -> None:
    assert parse_count(raw) == expected


@pytest.mark.parametrize("raw", ["0", "-3", "abc", "12abc", "", "1.5", "1_0", "\u0663"])
def test_parse_count_rejects(raw: str) -> None:
    with pytest.raises(InvalidArgument):
        parse_count(raw)


def test_settings_defaults() -> None:
    settings = load_settings()
    assert settings.count == DEFAULT_COUNT
    assert settings.unique is False
    assert settings.seed is None


def test_settings_ignore_environment(monkeypatch) -> None:
    monkeypatch.setenv("COUNT", "9")
    monkeypatch.setenv("UNIQUE", "true")
    settings = load_settings()
    assert settings.count == DEFAULT_COUNT
    assert settings.unique is False


def test_settings_parse_cli_strings() -> None:
    settings = load_settings(count="12", seed="42", unique=True)
    assert settings.count == 12
    assert settings.seed == 42
    assert settings.unique is True


def test_invalid_count_message() -> None:
    with pytest.raises(InvalidArgument, match="Invalid ticket count 'abc'"):
        load_settings(count="abc")


def test_invalid_seed() -> None:
    with pytest.raises(InvalidArgument, match="invalid seed"):
        load_settings(seed="xyz")
