# Ensure repo root is on sys.path for absolute imports like `status_service.*`
import sys
import os

import pytest

REPO_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    # keep host environment and any local .env out of settings
    for name in ("PORT", "APP_PORT", "APP_HOST", "APP_LOG_LEVEL", "APP_ENV", "APP_SERVICE_NAME"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
