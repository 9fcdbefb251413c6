import dataclasses

import pytest

from sqltemplate import util


@dataclasses.dataclass(frozen=True)
class Settings:
    required: str = util.env("SQLTEMPLATE_TEST_REQUIRED")
    defaulted: int = util.env("SQLTEMPLATE_TEST_DEFAULTED:5", convert=int)
    empty: str = util.env("SQLTEMPLATE_TEST_EMPTY:")


def test_env_loads_from_environ(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("SQLTEMPLATE_TEST_REQUIRED", "value")
    monkeypatch.setenv("SQLTEMPLATE_TEST_DEFAULTED", "10")

    settings = Settings()

    assert settings.required == "value"
    assert settings.defaulted == 10


def test_env_uses_default(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("SQLTEMPLATE_TEST_REQUIRED", "value")
    monkeypatch.delenv("SQLTEMPLATE_TEST_DEFAULTED", raising=False)
    monkeypatch.delenv("SQLTEMPLATE_TEST_EMPTY", raising=False)

    settings = Settings()

    assert settings.defaulted == 5
    assert settings.empty == ""


def test_env_missing_without_default(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("SQLTEMPLATE_TEST_REQUIRED", raising=False)

    with pytest.raises(KeyError):
        Settings()


def test_env_explicit_value_skips_lookup(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("SQLTEMPLATE_TEST_REQUIRED", raising=False)

    assert Settings(required="given").required == "given"


@pytest.mark.parametrize("value", ["1", "true", "TRUE", " yes ", "on"])
def test_to_bool_true(value):
    assert util.to_bool(value) is True


@pytest.mark.parametrize("value", ["0", "false", "No", "off"])
def test_to_bool_false(value):
    assert util.to_bool(value) is False


def test_to_bool_invalid():
    with pytest.raises(ValueError):
        util.to_bool("maybe")
