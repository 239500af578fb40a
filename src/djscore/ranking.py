"""Deterministic ordering of scored tracks."""

import enum
from functools import cmp_to_key
from typing import NamedTuple

from djscore.models import Track

TIE_EPSILON = 0.0005


class ScoreOrder(enum.Enum):
    LESS = -1
    TIE = 0
    GREATER = 1


class RankedEntry(NamedTuple):
    rank: int
    score: float
    title: str
    artist: str
    year: int


def compare_scores(a: float, b: float) -> ScoreOrder:
    """Three-way score comparison where gaps under TIE_EPSILON are ties.

    The bound is exclusive: a gap of exactly TIE_EPSILON still orders by score.
    """
    if abs(a - b) < TIE_EPSILON:
        return ScoreOrder.TIE
    return ScoreOrder.LESS if a < b else ScoreOrder.GREATER


def compare_tracks(a: Track, b: Track) -> int:
    """Score ascending, then artist ascending for tied scores."""
    order = compare_scores(a.score, b.score)
    if order is not ScoreOrder.TIE:
        return order.value
    if a.artist < b.artist:
        return -1
    if a.artist > b.artist:
        return 1
    return 0


def rank_tracks(tracks: list[Track]) -> list[RankedEntry]:
    """Sort ``tracks`` in place and return their 1-based ranking.

    list.sort is stable, so tracks equal on both keys keep their load order.
    """
    unscored = sum(1 for t in tracks if not t.is_scored)
    if unscored:
        raise ValueError(f"{unscored} track(s) have not been scored")

    tracks.sort(key=cmp_to_key(compare_tracks))
    return [
        RankedEntry(rank=i, score=t.score, title=t.title, artist=t.artist, year=t.year)
        for i, t in enumerate(tracks, 1)
    ]
