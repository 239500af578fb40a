"""Weighted Euclidean distance between tracks and the reference point."""

import math
from collections.abc import Iterable

import numpy as np

from djscore.models import ReferencePoint, Track, WeightVector

DEFAULT_WEIGHTS = WeightVector()


def _weighted_distance(vec: np.ndarray, ref_vec: np.ndarray, weight_vec: np.ndarray) -> float:
    diff = vec - ref_vec
    return math.sqrt(float(np.sum(weight_vec * np.square(diff))))


def score(
    track: Track,
    reference: ReferencePoint,
    weights: WeightVector = DEFAULT_WEIGHTS,
) -> float:
    """Distance from ``track`` to ``reference``; lower is a closer match.

    sqrt(sum(weight * (track - reference) ** 2)) over every attribute. No
    normalisation across attributes, so wide-range ones like ``dur``
    dominate unless weighted down.
    """
    return _weighted_distance(track.vector, reference.vector, weights.vector)


def score_tracks(
    tracks: Iterable[Track],
    reference: ReferencePoint,
    weights: WeightVector = DEFAULT_WEIGHTS,
) -> int:
    """Score every track in place. Returns the number scored."""
    # Snapshot so every track sees the same vectors
    ref_vec = reference.vector
    weight_vec = weights.vector
    count = 0
    for track in tracks:
        track.score = _weighted_distance(track.vector, ref_vec, weight_vec)
        count += 1
    return count
