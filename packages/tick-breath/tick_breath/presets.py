"""Breathing pattern presets and a JSON-file preset store."""
from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path
from typing import Any

from tick_breath.config import BreathingConfig
from tick_breath.types import ShapeKind

logger = logging.getLogger(__name__)

_DIFFICULTIES = ("beginner", "intermediate", "advanced")
_VOICE_CUES = ("off", "counts", "guidance")


def _now_ms() -> int:
    return int(time.time() * 1000)


class PhaseType(Enum):
    IN = "in"
    HOLD = "hold"
    OUT = "out"


@dataclass(frozen=True)
class Phase:
    type: PhaseType
    duration_ms: float
    label: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", PhaseType(self.type))
        if self.duration_ms <= 0:
            raise ValueError(f"duration_ms must be > 0, got {self.duration_ms}")


@dataclass(frozen=True)
class BreathingPattern:
    """A named, persistable breathing pattern.

    Attributes:
        id: Unique identifier within a store.
        name: Display name.
        shape: Polygon the pattern is drawn on.
        phases: One Phase per polygon edge, in traversal order.
        tempo: Speed multiplier; 2.0 halves every duration.
        default_cycles: Suggested number of cycles per session.
        tags: Free-form labels such as ``"focus"`` or ``"sleep"``.
        difficulty: One of beginner, intermediate, advanced.
        sound: Play a tone on each phase change.
        haptics: Vibrate on each phase change.
        voice_cues: One of off, counts, guidance.
    """

    id: str
    name: str
    shape: ShapeKind
    phases: tuple[Phase, ...]
    description: str = ""
    default_cycles: int = 5
    tempo: float = 1.0
    tags: tuple[str, ...] = ()
    difficulty: str = "beginner"
    is_custom: bool = True
    is_favorite: bool = False
    created_at: int = field(default_factory=_now_ms)
    sound: bool = False
    haptics: bool = False
    voice_cues: str = "off"

    def __post_init__(self) -> None:
        object.__setattr__(self, "shape", ShapeKind.parse(self.shape))
        object.__setattr__(self, "phases", tuple(self.phases))
        object.__setattr__(self, "tags", tuple(self.tags))
        if not self.id:
            raise ValueError("BreathingPattern id must be non-empty")
        if not self.name:
            raise ValueError("BreathingPattern name must be non-empty")
        if self.tempo <= 0:
            raise ValueError(f"tempo must be > 0, got {self.tempo}")
        if self.default_cycles < 1:
            raise ValueError(f"default_cycles must be >= 1, got {self.default_cycles}")
        if self.difficulty not in _DIFFICULTIES:
            raise ValueError(f"Unknown difficulty: {self.difficulty!r}")
        if self.voice_cues not in _VOICE_CUES:
            raise ValueError(f"Unknown voice_cues: {self.voice_cues!r}")
        if len(self.phases) != self.shape.phase_count:
            raise ValueError(
                f"{self.shape.value} pattern needs {self.shape.phase_count} phases, "
                f"got {len(self.phases)}"
            )

    @property
    def total_duration_ms(self) -> float:
        """One cycle at tempo 1.0."""
        return sum(phase.duration_ms for phase in self.phases)

    def to_config(self) -> BreathingConfig:
        """Session configuration with durations scaled by tempo."""
        return BreathingConfig.from_durations(
            self.shape, [phase.duration_ms / self.tempo for phase in self.phases],
        )


def _pattern(
    id: str, name: str, description: str, shape: str,
    durations: tuple[int, ...], cycles: int, tags: tuple[str, ...], difficulty: str,
) -> BreathingPattern:
    types = (PhaseType.IN, PhaseType.HOLD, PhaseType.OUT, PhaseType.HOLD)
    return BreathingPattern(
        id=id,
        name=name,
        description=description,
        shape=ShapeKind(shape),
        phases=tuple(Phase(t, d) for t, d in zip(types, durations)),
        default_cycles=cycles,
        tags=tags,
        difficulty=difficulty,
        is_custom=False,
        created_at=0,
    )


DEFAULT_PRESETS: tuple[BreathingPattern, ...] = (
    _pattern("triangle-classic", "Triangle Breathing",
             "Classic 3-phase breathing for focus and calm", "triangle",
             (4000, 4000, 4000), 5, ("focus", "calm", "beginner"), "beginner"),
    _pattern("square-box", "Square Breathing",
             "4-phase breathing for stress relief", "square",
             (4000, 4000, 4000, 4000), 4, ("stress-relief", "anxiety", "beginner"), "beginner"),
    _pattern("triangle-quick", "Quick Focus",
             "Fast-paced triangle breathing for quick energy", "triangle",
             (3000, 2000, 3000), 6, ("energy", "focus", "intermediate"), "intermediate"),
    _pattern("square-deep", "Deep Relaxation",
             "Slower square breathing for deep relaxation", "square",
             (5000, 5000, 6000, 4000), 3, ("sleep", "relaxation", "intermediate"), "intermediate"),
)


def pattern_to_dict(pattern: BreathingPattern) -> dict[str, Any]:
    return {
        "id": pattern.id,
        "name": pattern.name,
        "description": pattern.description,
        "shape": pattern.shape.value,
        "phases": [
            {"type": p.type.value, "duration_ms": p.duration_ms, "label": p.label}
            for p in pattern.phases
        ],
        "default_cycles": pattern.default_cycles,
        "tempo": pattern.tempo,
        "tags": list(pattern.tags),
        "difficulty": pattern.difficulty,
        "is_custom": pattern.is_custom,
        "is_favorite": pattern.is_favorite,
        "created_at": pattern.created_at,
        "sound": pattern.sound,
        "haptics": pattern.haptics,
        "voice_cues": pattern.voice_cues,
    }


def pattern_from_dict(data: dict[str, Any]) -> BreathingPattern:
    return BreathingPattern(
        id=data["id"],
        name=data["name"],
        description=data.get("description", ""),
        shape=ShapeKind.parse(data["shape"]),
        phases=tuple(
            Phase(PhaseType(p["type"]), p["duration_ms"], p.get("label"))
            for p in data["phases"]
        ),
        default_cycles=data.get("default_cycles", 5),
        tempo=data.get("tempo", 1.0),
        tags=tuple(data.get("tags", ())),
        difficulty=data.get("difficulty", "beginner"),
        is_custom=data.get("is_custom", True),
        is_favorite=data.get("is_favorite", False),
        created_at=data.get("created_at", 0),
        sound=data.get("sound", False),
        haptics=data.get("haptics", False),
        voice_cues=data.get("voice_cues", "off"),
    )


class PresetStore:
    """Ordered collection of patterns plus a selection, optionally file-backed.

    With a ``path`` every mutation is written back to the JSON file. Without
    one the store lives in memory only.
    """

    def __init__(self, path: str | Path | None = None) -> None:
        self._path = Path(path) if path is not None else None
        self._presets: dict[str, BreathingPattern] = {}
        self._selected_id: str | None = None
        self._last_updated = 0
        self._install_defaults()

    @property
    def path(self) -> Path | None:
        return self._path

    @property
    def selected_id(self) -> str | None:
        return self._selected_id

    @property
    def last_updated(self) -> int:
        return self._last_updated

    # --- Persistence ---

    def load(self) -> None:
        """Read the preset file, falling back to defaults if missing or unreadable."""
        if self._path is None:
            return
        if not self._path.exists():
            logger.info("no preset file at %s, writing defaults", self._path)
            self._install_defaults()
            self.save()
            return
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
            self.restore(data)
        except (OSError, ValueError, KeyError, TypeError) as exc:
            logger.warning("unreadable preset file %s (%s), using defaults", self._path, exc)
            self._install_defaults()
            return
        logger.info("loaded %d presets from %s", len(self._presets), self._path)

    def save(self) -> None:
        if self._path is None:
            raise ValueError("PresetStore has no path to save to")
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(self.snapshot(), indent=2), encoding="utf-8")
        logger.info("saved %d presets to %s", len(self._presets), self._path)

    def snapshot(self) -> dict[str, Any]:
        return {
            "presets": [pattern_to_dict(p) for p in self._presets.values()],
            "selected_preset_id": self._selected_id,
            "last_updated": self._last_updated,
        }

    def restore(self, data: dict[str, Any]) -> None:
        presets = [pattern_from_dict(p) for p in data["presets"]]
        self._presets = {p.id: p for p in presets}
        selected = data.get("selected_preset_id")
        self._selected_id = selected if selected in self._presets else None
        self._last_updated = data.get("last_updated", 0)

    # --- Queries ---

    def all(self) -> list[BreathingPattern]:
        return list(self._presets.values())

    def has(self, preset_id: str) -> bool:
        return preset_id in self._presets

    def get(self, preset_id: str) -> BreathingPattern:
        """Look up a pattern. Raises KeyError if absent."""
        if preset_id not in self._presets:
            raise KeyError(preset_id)
        return self._presets[preset_id]

    def selected(self) -> BreathingPattern | None:
        """Selected pattern, else the first one, else None for an empty store."""
        if self._selected_id in self._presets:
            return self._presets[self._selected_id]
        return next(iter(self._presets.values()), None)

    # --- Mutations ---

    def add(self, pattern: BreathingPattern) -> None:
        if pattern.id in self._presets:
            raise ValueError(f"Preset id already exists: {pattern.id!r}")
        self._presets[pattern.id] = pattern
        self._changed()

    def update(self, preset_id: str, **changes: Any) -> BreathingPattern:
        """Replace fields of a pattern. The id itself cannot change."""
        if "id" in changes:
            raise ValueError("Preset id cannot be changed")
        updated = replace(self.get(preset_id), **changes)
        self._presets[preset_id] = updated
        self._changed()
        return updated

    def delete(self, preset_id: str) -> None:
        """Remove a pattern. Deleting the selection selects the first remaining one."""
        self.get(preset_id)
        del self._presets[preset_id]
        if self._selected_id == preset_id:
            self._selected_id = next(iter(self._presets), None)
        self._changed()

    def select(self, preset_id: str) -> None:
        self.get(preset_id)
        self._selected_id = preset_id
        self._changed()

    def toggle_favorite(self, preset_id: str) -> bool:
        """Flip the favorite flag and return its new value."""
        pattern = self.update(preset_id, is_favorite=not self.get(preset_id).is_favorite)
        return pattern.is_favorite

    def reset_to_defaults(self) -> None:
        self._install_defaults()
        self._changed()

    def _install_defaults(self) -> None:
        self._presets = {p.id: p for p in DEFAULT_PRESETS}
        self._selected_id = DEFAULT_PRESETS[0].id
        self._last_updated = _now_ms()

    def _changed(self) -> None:
        self._last_updated = _now_ms()
        if self._path is not None:
            self.save()
