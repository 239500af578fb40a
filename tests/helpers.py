"""Test helpers for building tracks and CSV rows."""

from djscore.models import DEFAULT_REFERENCE, Track

HEADER = "Number,title,artist,top genre,year,bpm,nrgy,dnce,dB,live,val,dur,acous,spch,pop"


def make_track(title: str = "Song", artist: str = "Artist", **attrs: int) -> Track:
    """A track sitting on the default reference, with some attributes moved."""
    return Track(title=title, artist=artist, genre="pop", **{**DEFAULT_REFERENCE, **attrs})


def make_row(id_: int, title: str, artist: str, **attrs: int) -> str:
    """A CSV data row for a track on the default reference, with some attributes moved."""
    values = {**DEFAULT_REFERENCE, **attrs}
    return ",".join([str(id_), title, artist, "pop", *(str(v) for v in values.values())])
