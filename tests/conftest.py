"""Configure test environment for importing the project package."""
import sys
from pathlib import Path

import jax
import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if SRC.exists() and str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from bisectroot.core.settings import get_solver_settings, set_solver_settings  # noqa: E402

jax.config.update("jax_enable_x64", True)


@pytest.fixture(autouse=True)
def _reset_solver_settings():
    """Restore the global solver settings after each test."""
    original = get_solver_settings()
    yield
    set_solver_settings(
        precision=original.precision,
        max_iteration=original.max_iteration,
    )
