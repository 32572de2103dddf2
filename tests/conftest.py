# tests/conftest.py
import os
import sys
from pathlib import Path

import pytest

# ----------------------------------------------------------------------
# Make `src/` importable without installing the package first.
# ----------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).parents[1]
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from scor.config_loader import ENV_VAR, Config  # noqa: E402


# ----------------------------------------------------------------------
# Fixture: every test starts with a fresh configuration singleton and
# without SCOR_CONFIG_PATH leaking in from the environment.
# ----------------------------------------------------------------------
@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    monkeypatch.delenv(ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)
    Config.reset()
    yield
    Config.reset()
    # load_dotenv() may have set it behind monkeypatch's back
    os.environ.pop(ENV_VAR, None)


@pytest.fixture
def write_config(tmp_path):
    """Write a YAML config file and return its path."""
    def _write(text: str, name: str = "scor.yaml") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
