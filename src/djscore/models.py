"""Data models for tracks, the reference point and scoring weights."""

import math
from dataclasses import dataclass, field, fields

import numpy as np

# Order matters: it is the CSV column order and the order of every vector.
ATTRIBUTES = (
    "year",
    "bpm",
    "nrgy",
    "dnce",
    "db",
    "live",
    "val",
    "dur",
    "acous",
    "spch",
    "pop",
)

DEFAULT_REFERENCE = {
    "year": 2012,
    "bpm": 77,
    "nrgy": 47,
    "dnce": 62,
    "db": -7,
    "live": 3,
    "val": 68,
    "dur": 220,
    "acous": 0,
    "spch": 4,
    "pop": 75,
}


class ReferenceAlreadyResolved(RuntimeError):
    """Raised when a reference point is overwritten from a track twice."""


def _check_names(values: dict) -> None:
    unknown = sorted(set(values) - set(ATTRIBUTES))
    if unknown:
        raise ValueError(f"Unknown attribute(s): {', '.join(unknown)}")


@dataclass
class Track:
    title: str
    artist: str
    genre: str
    year: int
    bpm: int
    nrgy: int
    dnce: int
    db: int
    live: int
    val: int
    dur: int
    acous: int
    spch: int
    pop: int
    score: float = field(default=math.nan, compare=False)

    @property
    def vector(self) -> np.ndarray:
        """Attribute vector in ``ATTRIBUTES`` order."""
        return np.array([getattr(self, name) for name in ATTRIBUTES], dtype=np.float64)

    @property
    def is_scored(self) -> bool:
        return not math.isnan(self.score)

    def attributes(self) -> dict[str, int]:
        return {name: getattr(self, name) for name in ATTRIBUTES}


@dataclass
class ReferencePoint:
    """Target attribute vector every track is scored against.

    Starts at ``DEFAULT_REFERENCE`` and may be copied from a matched track
    exactly once per run.
    """

    year: int = DEFAULT_REFERENCE["year"]
    bpm: int = DEFAULT_REFERENCE["bpm"]
    nrgy: int = DEFAULT_REFERENCE["nrgy"]
    dnce: int = DEFAULT_REFERENCE["dnce"]
    db: int = DEFAULT_REFERENCE["db"]
    live: int = DEFAULT_REFERENCE["live"]
    val: int = DEFAULT_REFERENCE["val"]
    dur: int = DEFAULT_REFERENCE["dur"]
    acous: int = DEFAULT_REFERENCE["acous"]
    spch: int = DEFAULT_REFERENCE["spch"]
    pop: int = DEFAULT_REFERENCE["pop"]
    source_title: str | None = field(default=None, compare=False)

    @classmethod
    def with_overrides(cls, overrides: dict[str, int]) -> "ReferencePoint":
        """Default setpoints with some attributes replaced."""
        _check_names(overrides)
        return cls(**{**DEFAULT_REFERENCE, **overrides})

    @property
    def vector(self) -> np.ndarray:
        return np.array([getattr(self, name) for name in ATTRIBUTES], dtype=np.float64)

    @property
    def resolved(self) -> bool:
        return self.source_title is not None

    def overwrite_from(self, track: Track) -> None:
        """Copy a track's attribute vector into this reference point."""
        if self.resolved:
            raise ReferenceAlreadyResolved(
                f"Reference already taken from {self.source_title!r}"
            )
        for name in ATTRIBUTES:
            setattr(self, name, getattr(track, name))
        self.source_title = track.title

    def attributes(self) -> dict[str, int]:
        return {name: getattr(self, name) for name in ATTRIBUTES}


@dataclass(frozen=True)
class WeightVector:
    """Per-attribute multiplier applied to each squared difference."""

    year: float = 1.0
    bpm: float = 1.0
    nrgy: float = 1.0
    dnce: float = 1.0
    db: float = 1.0
    live: float = 1.0
    val: float = 1.0
    dur: float = 1.0
    acous: float = 1.0
    spch: float = 1.0
    pop: float = 1.0

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not math.isfinite(value) or value < 0:
                raise ValueError(f"Weight for {f.name} must be a finite non-negative number, got {value}")

    @classmethod
    def from_overrides(cls, overrides: dict[str, float]) -> "WeightVector":
        _check_names(overrides)
        return cls(**overrides)

    @property
    def vector(self) -> np.ndarray:
        return np.array([getattr(self, name) for name in ATTRIBUTES], dtype=np.float64)
