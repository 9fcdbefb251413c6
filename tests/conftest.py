import pytest

from sqltemplate import Config
from sqltemplate.template import PlaceholderCheck


ENVVARS = ("SQLTEMPLATE_PLACEHOLDER_CHECK", "SQLTEMPLATE_STRICT_VALUES", "SQLTEMPLATE_CONSUME_TEMPLATE")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch):
    # make sure the host's environment can't change the defaults under test
    for key in ENVVARS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def config() -> Config:
    return Config()


@pytest.fixture
def consume_config() -> Config:
    """Substitute into the stored template, so a second build fails."""
    return Config(consume_template=True)


@pytest.fixture
def strict_config() -> Config:
    return Config(strict_values=True)


@pytest.fixture
def exact_config() -> Config:
    return Config(placeholder_check=PlaceholderCheck.Exact)
