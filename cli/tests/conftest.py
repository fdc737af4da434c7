"""
Screengen CLI test configuration.

Every test starts from a clean environment so a developer's own
SCREENGEN_* variables cannot leak into the results.
"""

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("SCREENGEN_PROFILE", "SCREENGEN_OUTPUT_DIR", "SCREENGEN_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
