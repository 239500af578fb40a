"""Resolve the reference point from a track title."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from djscore.models import ReferencePoint, Track

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReferenceFound:
    title: str
    track: Track
    source_index: int
    found: bool = field(default=True, init=False)


@dataclass(frozen=True)
class ReferenceNotFound:
    title: str
    found: bool = field(default=False, init=False)


Resolution = ReferenceFound | ReferenceNotFound


def resolve_reference(
    reference: ReferencePoint,
    title: str,
    sources: Iterable[Iterable[Track]],
) -> Resolution:
    """Copy the first track titled ``title`` into ``reference``.

    Sources are scanned in order and scanning stops at the first exact
    match, so later sources are never consumed. Duplicates further on are
    ignored. When nothing matches, ``reference`` is left as it was.
    """
    for index, tracks in enumerate(sources):
        for track in tracks:
            if track.title == title:
                reference.overwrite_from(track)
                logger.info("Reference set from %r (source %d)", title, index)
                return ReferenceFound(title=title, track=track, source_index=index)
    logger.info("No track titled %r in any source", title)
    return ReferenceNotFound(title=title)
