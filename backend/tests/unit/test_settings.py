# backend/tests/unit/test_settings.py

import pytest
from pydantic import ValidationError

from sanctuary.config.settings import Settings


def test_defaults(monkeypatch):
    for name in ["SANCTUARY_ENVIRONMENT", "SANCTUARY_LOG_LEVEL", "SANCTUARY_FLOW_MAX_DEPTH", "SANCTUARY_DEFAULT_SORT_OPTION"]:
        monkeypatch.delenv(name, raising=False)
    config = Settings(_env_file=None)
    assert config.environment == "production"
    assert config.log_level == "INFO"
    assert config.flow_max_depth is None
    assert config.default_sort_option == "all"


def test_reads_prefixed_environment(monkeypatch):
    monkeypatch.setenv("SANCTUARY_FLOW_MAX_DEPTH", "8")
    monkeypatch.setenv("SANCTUARY_LOG_LEVEL", "debug")
    config = Settings(_env_file=None)
    assert config.flow_max_depth == 8
    assert config.log_level == "DEBUG"


@pytest.mark.parametrize("name, value", [
    ("SANCTUARY_FLOW_MAX_DEPTH", "0"),
    ("SANCTUARY_LOG_LEVEL", "loud"),
])
def test_rejects_bad_values(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
