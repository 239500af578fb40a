"""Plain-text playlist report."""

from collections.abc import Sequence
from typing import TextIO

from djscore.ranking import RankedEntry


def format_entry(entry: RankedEntry) -> str:
    return (
        f"{entry.rank} -  DJ Score: {entry.score:g}\n"
        f"\t\t{entry.title} by {entry.artist} from {entry.year}"
    )


def render_playlist(
    entries: Sequence[RankedEntry],
    out: TextIO,
    limit: int | None = None,
) -> int:
    """Write the summary line and up to ``limit`` entries. Returns entries written.

    The summary always counts every ranked track, however many are shown.
    """
    out.write(f"Playlist created using data from {len(entries)} songs!\n")
    shown = entries if limit is None else entries[:limit]
    for entry in shown:
        out.write(format_entry(entry) + "\n")
    return len(shown)
