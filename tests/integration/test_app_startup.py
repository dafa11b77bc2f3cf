"""Start-up tests run in a fresh interpreter, where module import order is not primed by conftest."""

import os
import subprocess
import sys
from pathlib import Path

import pytest

SRC = Path(__file__).resolve().parents[2] / "src"

API_MODULES = ["dependencies", "errors", "orders", "portfolio", "products", "schemas", "site", "users"]


def _run(code: str, cwd: Path) -> subprocess.CompletedProcess:
    env = {
        **os.environ,
        "PYTHONPATH": str(SRC),
        "PROTEAN_ENV": "test",
        "SOKOBO_SEED_DEMO_DATA": "false",
    }
    return subprocess.run([sys.executable, "-c", code], cwd=cwd, env=env, capture_output=True, text=True, timeout=120)


@pytest.mark.parametrize("module", API_MODULES)
def test_domain_initializes_after_any_api_module(module, tmp_path):
    code = f"import sokobo.api.{module}\nfrom sokobo.domain import sokobo as domain\ndomain.init()\n"

    result = _run(code, tmp_path)

    assert result.returncode == 0, result.stderr


def test_app_module_imports(tmp_path):
    result = _run("import app\nassert app.app.title == 'Sokobo API'\n", tmp_path)

    assert result.returncode == 0, result.stderr
