# tests/conftest.py
from __future__ import annotations
import os
import sys
from pathlib import Path

import pytest

# Ensure repo root is importable (so `import panzoom...` works without install)
ROOT = Path(__file__).resolve().parents[1]
HERE = Path(__file__).resolve().parent
for p in (ROOT, HERE):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

# Headless Pygame setup
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from fakes import FakeViewport  # noqa: E402


@pytest.fixture
def viewport() -> FakeViewport:
    return FakeViewport()


@pytest.fixture(scope="session", autouse=True)
def _init_pygame():
    try:
        import pygame
        pygame.init()
        yield
    finally:
        try:
            import pygame
            pygame.quit()
        except Exception:
            pass
