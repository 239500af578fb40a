"""Playlist pipeline: resolve the reference, score, then rank."""

import logging
from dataclasses import dataclass

from djscore.models import ReferencePoint, WeightVector
from djscore.ranking import RankedEntry, rank_tracks
from djscore.reference import ReferenceFound, ReferenceNotFound, resolve_reference
from djscore.scoring import DEFAULT_WEIGHTS, score_tracks
from djscore.store import TrackStore

logger = logging.getLogger(__name__)


@dataclass
class Playlist:
    entries: list[RankedEntry]
    reference: ReferencePoint
    starter: ReferenceFound | None = None
    weights: WeightVector = DEFAULT_WEIGHTS

    @property
    def total(self) -> int:
        return len(self.entries)


def build_playlist(
    store: TrackStore,
    reference: ReferencePoint | None = None,
    weights: WeightVector = DEFAULT_WEIGHTS,
    title: str | None = None,
) -> Playlist | ReferenceNotFound:
    """Rank every stored track against the reference point.

    With ``title`` set, the reference is first copied from the matching
    track; if none matches nothing is scored and ReferenceNotFound is
    returned instead of a playlist.
    """
    if reference is None:
        reference = ReferencePoint()

    starter = None
    if title is not None:
        resolution = resolve_reference(reference, title, store.sources())
        if not resolution.found:
            return resolution
        starter = resolution

    tracks = store.all()
    count = score_tracks(tracks, reference, weights)
    logger.debug("Scored %d tracks", count)

    entries = rank_tracks(tracks)
    return Playlist(entries=entries, reference=reference, starter=starter, weights=weights)
