"""In-memory track store and CSV row decoding."""

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import BinaryIO

import pyarrow as pa
from pyarrow import csv as pa_csv

from djscore.models import ATTRIBUTES, Track

logger = logging.getLogger(__name__)

CSV_COLUMNS = ("id", "title", "artist", "genre", *ATTRIBUTES)

TEXT_COLUMNS = ("id", "title", "artist", "genre")

# Text stays raw bytes so files that are not UTF-8 still load
COLUMN_TYPES = {
    **{name: pa.binary() for name in TEXT_COLUMNS},
    **{name: pa.int64() for name in ATTRIBUTES},
}

Source = str | Path | BinaryIO


class ParseError(ValueError):
    """A source contains a row that cannot be decoded into a Track."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"{source}: {reason}")
        self.source = source
        self.reason = reason


def _source_name(source: Source) -> str:
    if isinstance(source, (str, Path)):
        return str(source)
    return getattr(source, "name", "<stream>")


def _read_bytes(source: Source) -> bytes:
    if isinstance(source, (str, Path)):
        return Path(source).read_bytes()
    return source.read()


def read_tracks(source: Source) -> list[Track]:
    """Decode every data row of a CSV source.

    The first line is a header and is discarded. Rows must carry exactly
    the columns in ``CSV_COLUMNS``; numeric columns must be integers.
    Text fields that are not valid UTF-8 are kept with surrogate escapes.
    Raises ParseError on the first bad row, returning nothing from the source.
    """
    name = _source_name(source)
    data = _read_bytes(source)

    # First line is the header; it is never decoded
    _, _, body = data.partition(b"\n")
    if not body.strip():
        return []

    try:
        table = pa_csv.read_csv(
            pa.BufferReader(body),
            read_options=pa_csv.ReadOptions(column_names=list(CSV_COLUMNS)),
            convert_options=pa_csv.ConvertOptions(
                column_types=COLUMN_TYPES,
                null_values=[],
                strings_can_be_null=False,
            ),
        )
    except (pa.ArrowInvalid, pa.ArrowTypeError) as e:
        raise ParseError(name, str(e)) from e

    tracks = []
    for row in table.to_pylist():
        row.pop("id")
        for name in TEXT_COLUMNS[1:]:
            row[name] = row[name].decode("utf-8", errors="surrogateescape")
        tracks.append(Track(**row))
    return tracks


def iter_sources(sources: Iterable[Source]) -> Iterator[list[Track]]:
    """Decode sources one at a time, only as far as the caller consumes.

    For resolving a starter title before the full load; pass the result to
    ``resolve_reference`` and later sources are never read.
    """
    for source in sources:
        logger.debug("Decoding %s", _source_name(source))
        yield read_tracks(source)


class TrackStore:
    """Ordered tracks held for the duration of one run."""

    def __init__(self) -> None:
        self._tracks: list[Track] = []
        self._by_source: list[list[Track]] = []

    def __len__(self) -> int:
        return len(self._tracks)

    def load(self, source: Source) -> int:
        """Append a source's tracks in file order. Returns the number added.

        All-or-nothing: on ParseError the store is left unchanged.
        """
        tracks = read_tracks(source)
        self._tracks.extend(tracks)
        self._by_source.append(tracks)
        logger.info("Loaded %d tracks from %s", len(tracks), _source_name(source))
        return len(tracks)

    def all(self) -> list[Track]:
        """The stored list itself; scoring and sorting act on it in place."""
        return self._tracks

    def sources(self) -> Iterator[list[Track]]:
        """Tracks grouped by the source they were loaded from, in load order."""
        yield from self._by_source

    def find_by_title(self, title: str) -> Track | None:
        """First track, in load order, whose title equals ``title`` exactly."""
        for tracks in self._by_source:
            for track in tracks:
                if track.title == title:
                    return track
        return None
