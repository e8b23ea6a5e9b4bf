# panzoom/app.py
"""
Demo loop: opens a resizable window and drives a `Camera2D` with touch,
mouse drag and wheel. The window caption shows the camera state.

    python -m panzoom.app --headless --frames 30
"""
from __future__ import annotations

import argparse
import logging
import os
import time
import traceback
from pathlib import Path
from typing import Optional, Sequence, Tuple

import panzoom.utils.settings as settings
from panzoom.utils.logging_setup import configure_logging, get_logger


def configure_environment(headless: Optional[bool] = None) -> None:
    """Robust SDL/Pygame defaults for Linux/CI/headless."""
    ci = os.getenv("CI", "").lower() == "true"
    no_display = not (os.getenv("DISPLAY") or os.getenv("WAYLAND_DISPLAY"))
    if headless is None:
        headless = ci or no_display
    os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
    if headless:
        os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
        os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


def _write_crash_file() -> Path:
    crash_dir = Path("logs")
    crash_dir.mkdir(parents=True, exist_ok=True)
    stamp = time.strftime("%Y%m%d_%H%M%S")
    path = crash_dir / f"crash_{stamp}.txt"
    path.write_text("Unexpected crash.\n\n" + traceback.format_exc(), encoding="utf-8")
    return path


def run(size: Tuple[int, int] = (settings.SCREEN_WIDTH, settings.SCREEN_HEIGHT), *,
        frames: int = 0) -> int:
    """Run the demo. `frames` > 0 stops after that many frames (smoke runs)."""
    import pygame  # after SDL env vars are set

    from panzoom.core.camera import Camera2D
    from panzoom.core.config import GestureConfig
    from panzoom.core.controller import PanZoomController
    from panzoom.utils.event_bus import VIEWPORT_RESIZED, EventBus

    log = get_logger("app")
    pygame.init()
    try:
        screen = pygame.display.set_mode(size, pygame.RESIZABLE)
        pygame.display.set_caption(settings.CAPTION)
        config = GestureConfig.from_settings()
        camera = Camera2D(anchor_mode=config.anchor_mode)
        bus = EventBus()
        controller = PanZoomController(camera, screen, config, bus=bus)
        clock = pygame.time.Clock()

        running = True
        frame = 0
        while running:
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT:
                    running = False
                elif ev.type == pygame.KEYDOWN and ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.type == pygame.VIDEORESIZE:
                    bus.emit(VIEWPORT_RESIZED, w=ev.w, h=ev.h)
                elif controller.handle_pygame_event(ev):
                    pygame.display.set_caption(
                        f"{settings.CAPTION}  pos=({camera.position.x:.0f}, {camera.position.y:.0f})"
                        f"  zoom={camera.zoom:.2f}"
                    )
            screen.fill((24, 26, 30))
            pygame.display.flip()
            clock.tick(settings.FPS)
            frame += 1
            if frames and frame >= frames:
                running = False
        controller.close()
        return 0
    except SystemExit as e:
        return int(e.code or 0)
    except Exception as e:
        log.exception("Unhandled exception in demo loop: %s", e)
        log.error("Crash report written to %s", _write_crash_file())
        return 1
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Touch pan/zoom camera demo")
    ap.add_argument("--headless", action="store_true", help="use SDL dummy drivers")
    ap.add_argument("--frames", type=int, default=0, help="exit after N frames")
    ap.add_argument("--debug", action="store_true", help="log gesture transitions")
    ap.add_argument("--log-file", action="store_true", help="also log to logs/")
    args = ap.parse_args(argv)

    configure_environment(True if args.headless else None)
    configure_logging(logging.DEBUG if args.debug else logging.INFO, log_to_file=args.log_file)
    return run(frames=args.frames)


if __name__ == "__main__":
    raise SystemExit(main())
