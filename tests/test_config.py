import pytest

from othello.config import Settings


def test_defaults():
    settings = Settings.from_env({})
    assert settings == Settings(depth=4, max_depth=8, prune=True, log_level="WARNING")


def test_env_overrides():
    settings = Settings.from_env({
        "OTHELLO_DEPTH": "2",
        "OTHELLO_MAX_DEPTH": "5",
        "OTHELLO_PRUNE": "off",
        "OTHELLO_LOG_LEVEL": "debug",
    })
    assert settings.depth == 2
    assert settings.max_depth == 5
    assert settings.prune is False
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    "env",
    [
        {"OTHELLO_DEPTH": "deep"},
        {"OTHELLO_DEPTH": "0"},
        {"OTHELLO_DEPTH": "6", "OTHELLO_MAX_DEPTH": "5"},
        {"OTHELLO_PRUNE": "maybe"},
        {"OTHELLO_LOG_LEVEL": "LOUD"},
    ],
)
def test_invalid_env_is_rejected(env):
    with pytest.raises(ValueError):
        Settings.from_env(env)
