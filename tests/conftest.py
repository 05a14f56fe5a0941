"""Shared pytest fixtures for warpspec tests."""

from __future__ import annotations

from collections.abc import Iterator
import logging

import pytest

from warpspec.core.config.loader import CONFIG_PATH_ENV, LOG_LEVEL_ENV
from warpspec.core.curves.enums import CurveKind
from warpspec.core.curves.models import WarpSpec

# ============================================================================
# Environment Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host environment variables from leaking into config loading."""
    monkeypatch.delenv(CONFIG_PATH_ENV, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Undo configure_logging() side effects on the root logger."""
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


# ============================================================================
# Spec Fixtures
# ============================================================================


@pytest.fixture
def freq_spec() -> WarpSpec:
    """Exponential 20 Hz - 20 kHz spec."""
    return WarpSpec(minval=20, maxval=20000, curve=CurveKind.EXPONENTIAL)


@pytest.fixture
def db_spec() -> WarpSpec:
    """Decibel -96 dB - 0 dB spec."""
    return WarpSpec(minval=-96, maxval=0, curve=CurveKind.DECIBEL)


@pytest.fixture
def divmul_spec() -> WarpSpec:
    """Divide/multiply 0.5 - 2 spec."""
    return WarpSpec(minval=0.5, maxval=2, curve=CurveKind.DIVMUL)
