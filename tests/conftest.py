"""Root test configuration — isolate every test from local outlaw.yaml files and OUTLAW_* env vars"""

import os

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Run each test from an empty tmp directory with no OUTLAW_* overrides."""
    for name in list(os.environ):
        if name.startswith("OUTLAW_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
