import pytest

from solcheck.config import CheckSettings
from solcheck.core import InvalidArgument


def test_defaults_without_environment() -> None:
    settings = CheckSettings.from_env({})
    assert settings == CheckSettings()
    assert settings.workers == 1
    assert settings.timeout_s is None
    assert settings.report_format == "terminal"


def test_environment_overrides() -> None:
    settings = CheckSettings.from_env(
        {
            "SOLCHECK_WORKERS": "4",
            "SOLCHECK_TIMEOUT": "1.5",
            "SOLCHECK_REPORT": "JSON",
            "SOLCHECK_NO_COLOR": "1",
            "SOLCHECK_LOG_LEVEL": "debug",
        }
    )
    assert settings.workers == 4
    assert settings.timeout_s == 1.5
    assert settings.report_format == "json"
    assert settings.color is False
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    "env",
    [
        {"SOLCHECK_WORKERS": "many"},
        {"SOLCHECK_WORKERS": "0"},
        {"SOLCHECK_TIMEOUT": "-1"},
        {"SOLCHECK_REPORT": "xml"},
        {"SOLCHECK_LOG_LEVEL": "chatty"},
    ],
)
def test_invalid_environment_values(env) -> None:
    with pytest.raises(InvalidArgument):
        CheckSettings.from_env(env)


def test_merged_ignores_none() -> None:
    settings = CheckSettings(workers=3).merged(workers=None, report_format="yaml")
    assert settings.workers == 3
    assert settings.report_format == "yaml"
