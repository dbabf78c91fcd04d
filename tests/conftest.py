"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import os
from pathlib import Path
import sys

import pytest

from order_engine.core.params import Scenario, default_scenario


def _preload_numpy_without_macos_check() -> None:
    """Preload NumPy while bypassing the macOS sanity check.

    Some macOS BLAS/LAPACK builds crash during NumPy's import-time polyfit check.
    """
    if sys.platform != "darwin":
        return

    original_platform = sys.platform
    try:
        sys.platform = "linux"
        import numpy  # noqa: F401
    finally:
        sys.platform = original_platform


_preload_numpy_without_macos_check()


@pytest.fixture
def project_root() -> Path:
    return Path(__file__).resolve().parents[1]


@pytest.fixture
def script_env(project_root: Path) -> dict[str, str]:
    env = dict(os.environ)
    env["PYTHONPATH"] = str(project_root / "src")
    return env


@pytest.fixture
def reference_scenario() -> Scenario:
    return default_scenario()


@pytest.fixture
def small_scenario() -> Scenario:
    return Scenario(orders=(1, 2, 3), demands=(1, 3), probabilities=(0.25, 0.75))
