"""Breathing Visualizer — interactive tick-breath demo.

A marker travels around a triangle or square while the outline breathes,
glows, rotates and leaves a trail. Exercises BreathingSession, the trail
calculator and the preset store.

Controls:
  Space   Start / stop
  R       Restart
  N       Next preset (stops the session)
  F       Toggle favorite on the current preset
  Esc     Quit

Run: python examples/breathing-visualizer/main.py [--presets PATH] [--preset ID]
"""
from __future__ import annotations

import argparse
import logging
import math
import sys

import pygame

from tick_breath import (
    BreathingSession,
    Frame,
    Position,
    PresetStore,
    ShapeKind,
    outline_path,
    trail_points,
)
from tick_breath.constants import CANVAS_H, CANVAS_W, RIPPLE_MAX_RADIUS, ROTATION_CENTER

# --- Configuration ---
SCALE = 2
WIDTH, HEIGHT = CANVAS_W * SCALE, CANVAS_H * SCALE + 60
FPS = 60
TITLE = "tick-breath Visualizer"

# Colors
BG_COLOR = (18, 18, 32)
OUTLINE_COLOR = (70, 70, 100)
TRAIL_COLOR = (120, 220, 255)
MARKER_COLOR = (255, 255, 255)
GLOW_COLOR = (120, 200, 255)
HUD_COLOR = (200, 200, 220)
HUD_DIM = (120, 120, 140)


def to_screen(p: Position, frame: Frame) -> tuple[float, float]:
    """Apply the frame's scale and rotation around the canvas center."""
    cx, cy = ROTATION_CENTER
    dx = (p.x - cx) * frame.scale
    dy = (p.y - cy) * frame.scale
    a = math.radians(frame.rotation)
    x = cx + dx * math.cos(a) - dy * math.sin(a)
    y = cy + dx * math.sin(a) + dy * math.cos(a)
    return x * SCALE, y * SCALE


def draw_frame(
    screen: pygame.Surface, session: BreathingSession, frame: Frame, pulse_age: float,
) -> None:
    shape: ShapeKind = session.config.shape

    outline = [to_screen(p, frame) for p in outline_path(shape)]
    pygame.draw.polygon(screen, OUTLINE_COLOR, outline, 2)

    if session.active:
        trail = [to_screen(p, frame) for p in trail_points(shape, frame.trail)]
        if len(trail) >= 2:
            pygame.draw.lines(screen, TRAIL_COLOR, False, trail, 4)

    mx, my = to_screen(frame.position, frame)
    glow_r = int((frame.marker_radius + 14 * frame.glow_intensity) * SCALE)
    if glow_r > 0:
        glow = pygame.Surface((glow_r * 2, glow_r * 2), pygame.SRCALPHA)
        alpha = int(40 + 120 * frame.glow_intensity)
        pygame.draw.circle(glow, (*GLOW_COLOR, alpha), (glow_r, glow_r), glow_r)
        screen.blit(glow, (mx - glow_r, my - glow_r))

    if frame.pulse_visible:
        ripple_r = frame.marker_radius + (RIPPLE_MAX_RADIUS - frame.marker_radius) * pulse_age
        pygame.draw.circle(screen, GLOW_COLOR, (mx, my), int(ripple_r * SCALE), 1)

    pygame.draw.circle(screen, MARKER_COLOR, (mx, my), int(frame.marker_radius * SCALE))


def draw_hud(
    screen: pygame.Surface, font: pygame.font.Font, session: BreathingSession,
    frame: Frame, preset_name: str, favorite: bool,
) -> None:
    top = CANVAS_H * SCALE
    label = font.render(frame.phase_label, True, HUD_COLOR)
    screen.blit(label, (WIDTH // 2 - label.get_width() // 2, top + 8))

    star = " *" if favorite else ""
    status = "running" if session.active else "stopped"
    info = (
        f"{preset_name}{star}  |  {status}  |  phase {frame.current_phase + 1}"
        f"/{session.config.phase_count}  |  scale {frame.scale:.3f}"
        f"  glow {frame.glow_intensity:.2f}"
    )
    text = font.render(info, True, HUD_DIM)
    screen.blit(text, (10, top + 34))


def main() -> None:
    parser = argparse.ArgumentParser(description=TITLE)
    parser.add_argument("--presets", help="JSON preset file (created if missing)")
    parser.add_argument("--preset", help="preset id to start with")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    store = PresetStore(args.presets)
    store.load()
    if args.preset:
        store.select(args.preset)
    preset = store.selected()
    if preset is None:
        store.reset_to_defaults()
        preset = store.selected()
    session = BreathingSession(preset.to_config())

    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption(TITLE)
    pg_clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 16)

    pulse_started = 0
    was_pulsing = False
    running = True

    while running:
        pg_clock.tick(FPS)
        now = pygame.time.get_ticks()

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    if session.active:
                        session.stop()
                        session.reset()
                    else:
                        session.start(now)
                elif event.key == pygame.K_r:
                    session.restart(now)
                elif event.key == pygame.K_n:
                    presets = store.all()
                    index = [p.id for p in presets].index(preset.id)
                    preset = presets[(index + 1) % len(presets)]
                    store.select(preset.id)
                    session.stop()
                    session.reconfigure(preset.to_config())
                elif event.key == pygame.K_f:
                    store.toggle_favorite(preset.id)
                    preset = store.get(preset.id)

        # --- Tick ---
        frame = session.advance(now)
        if frame.pulse_visible and not was_pulsing:
            pulse_started = now
        was_pulsing = frame.pulse_visible
        pulse_age = min((now - pulse_started) / session.pulse.duration_ms, 1.0)

        # --- Render ---
        screen.fill(BG_COLOR)
        draw_frame(screen, session, frame, pulse_age)
        draw_hud(screen, font, session, frame, preset.name, preset.is_favorite)
        pygame.display.flip()

    session.stop()
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
