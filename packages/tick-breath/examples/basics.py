"""Breathing basics -- drive a session and print what a renderer would draw.

Demonstrates:
- Building a configuration from a preset
- Feeding a BreathingSession monotonic timestamps
- Reading per-frame output: position, scale, glow, trail and pulse
- Phase-change hooks

Run: python -m examples.basics
"""

import logging

from tick_breath import DEFAULT_PRESETS, BreathingSession, dash_array

FRAME_MS = 250


def announce(session: BreathingSession, old: int, new: int) -> None:
    print(f"  -- phase {old} -> {new}: {session.frame().phase_label}")


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    preset = DEFAULT_PRESETS[0]
    print(f"=== {preset.name} ({preset.shape.value}) ===\n")

    session = BreathingSession(preset.to_config())
    session.on_phase(announce)
    session.start(0)

    cycle_ms = int(session.config.cycle_duration_ms)
    for now in range(FRAME_MS, cycle_ms + FRAME_MS, FRAME_MS):
        frame = session.advance(now)
        pulse = "*" if frame.pulse_visible else " "
        print(
            f"  t={now:>6}ms {pulse} ({frame.position.x:6.1f}, {frame.position.y:6.1f})"
            f"  scale={frame.scale:.4f}  glow={frame.glow_intensity:.2f}"
            f"  rot={frame.rotation:7.2f}  dash='{dash_array(frame.trail)}'"
        )

    session.stop()
    print(f"\nDone. Cumulative progress {session.state.cumulative_progress:.2f} phases.")


if __name__ == "__main__":
    main()
