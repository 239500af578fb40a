"""CLI entrypoint for djscore."""

import logging
import sys
from collections.abc import Callable
from pathlib import Path

import typer
from tqdm import tqdm

app = typer.Typer(
    name="djscore",
    help="Rank songs by how close they sound to a target",
    no_args_is_help=True,
)


def _parse_pairs(pairs: list[str], option: str, cast: Callable[[str], float]) -> dict:
    """Turn ``NAME=VALUE`` strings into a dict."""
    parsed = {}
    for pair in pairs:
        name, sep, raw = pair.partition("=")
        if not sep or not name:
            raise typer.BadParameter(f"expected NAME=VALUE, got {pair!r}", param_hint=option)
        try:
            parsed[name.strip()] = cast(raw.strip())
        except ValueError:
            raise typer.BadParameter(f"bad value for {name}: {raw!r}", param_hint=option) from None
    return parsed


def _load_store(sources: list[Path]):
    from djscore.store import ParseError, TrackStore

    for source in sources:
        if not source.is_file():
            typer.echo(f"Error: {source} is not a file", err=True)
            raise typer.Exit(1)

    store = TrackStore()
    try:
        for source in tqdm(sources, desc="Loading songs", unit="file", leave=False):
            store.load(source)
    except ParseError as e:
        typer.echo(f"Error: could not parse {e.source}: {e.reason}", err=True)
        raise typer.Exit(1)
    except OSError as e:
        typer.echo(f"Error: could not read {e.filename or e}: {e.strerror or e}", err=True)
        raise typer.Exit(1)
    return store


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress to stderr"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def build(
    sources: list[Path] = typer.Argument(..., help="CSV files of song data, merged in order"),
    title: str | None = typer.Option(None, "--title", "-t", help="Use this song as the playlist starter"),
    prompt: bool = typer.Option(False, "--prompt", help="Ask for the starter song title"),
    weight: list[str] | None = typer.Option(None, "--weight", "-w", help="Attribute weight as NAME=VALUE (repeatable)"),
    target: list[str] | None = typer.Option(None, "--target", help="Default setpoint override as NAME=VALUE (repeatable)"),
    n: int | None = typer.Option(None, "-n", min=1, help="Number of entries to show (default: all)"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write the playlist here instead of stdout"),
) -> None:
    """Build a playlist ranked by distance to a target song or setpoints."""
    from djscore.models import ReferencePoint, WeightVector
    from djscore.playlist import build_playlist
    from djscore.reference import ReferenceNotFound
    from djscore.report import render_playlist

    try:
        weights = WeightVector.from_overrides(_parse_pairs(weight or [], "--weight", float))
        reference = ReferencePoint.with_overrides(_parse_pairs(target or [], "--target", int))
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e

    if target and (title is not None or prompt):
        raise typer.BadParameter("cannot be combined with a starter song", param_hint="--target")

    store = _load_store(sources)

    if title is None and prompt:
        title = typer.prompt("Enter a song title")

    result = build_playlist(store, reference=reference, weights=weights, title=title)
    if isinstance(result, ReferenceNotFound):
        typer.echo(f"No match found for {title}.", err=True)
        raise typer.Exit(1)

    if result.starter is not None:
        typer.echo(f"{title} has been set as the playlist starter!", err=True)
    typer.echo("Creating playlist...", err=True)

    if output is None:
        render_playlist(result.entries, sys.stdout, limit=n)
    else:
        with output.open("w", encoding="utf-8") as fh:
            render_playlist(result.entries, fh, limit=n)
        typer.echo(f"Wrote {output}", err=True)


@app.command()
def lookup(
    title: str = typer.Argument(..., help="Exact song title"),
    sources: list[Path] = typer.Argument(..., help="CSV files of song data"),
) -> None:
    """Show the attributes of the first song with this exact title."""
    store = _load_store(sources)
    track = store.find_by_title(title)
    if track is None:
        typer.echo(f"No match found for {title}.", err=True)
        raise typer.Exit(1)

    typer.echo(f"\n{track.title} by {track.artist} ({track.genre})\n")
    for name, value in track.attributes().items():
        typer.echo(f"  {name:>5}: {value}")


if __name__ == "__main__":
    app()
