import os

import pytest

from esmapping.config import ENV_PREFIX, get_settings


@pytest.fixture(autouse=True)
def settings(monkeypatch, tmp_path):
    # Don't let environment variables or a local .env file change the defaults
    for var in list(os.environ):
        if var.lower().startswith(ENV_PREFIX):
            monkeypatch.delenv(var)
    monkeypatch.setenv(f"{ENV_PREFIX}env_file", str(tmp_path / ".env"))
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()
