"""Tests for track, reference point and weight models."""

import math

import numpy as np
import pytest

from djscore.models import (
    ATTRIBUTES,
    DEFAULT_REFERENCE,
    ReferenceAlreadyResolved,
    ReferencePoint,
    WeightVector,
)
from helpers import make_track


class TestTrack:
    def test_unscored_by_default(self) -> None:
        track = make_track()
        assert math.isnan(track.score)
        assert track.is_scored is False

    def test_vector_follows_attribute_order(self) -> None:
        track = make_track(year=1999, pop=10)
        vec = track.vector
        assert vec.shape == (len(ATTRIBUTES),)
        assert vec[ATTRIBUTES.index("year")] == 1999
        assert vec[ATTRIBUTES.index("pop")] == 10


class TestReferencePoint:
    def test_defaults(self) -> None:
        assert ReferencePoint().attributes() == DEFAULT_REFERENCE

    def test_with_overrides(self) -> None:
        ref = ReferencePoint.with_overrides({"bpm": 120, "db": -3})
        assert ref.bpm == 120
        assert ref.db == -3
        assert ref.year == DEFAULT_REFERENCE["year"]

    def test_unknown_override(self) -> None:
        with pytest.raises(ValueError, match="tempo"):
            ReferencePoint.with_overrides({"tempo": 120})

    def test_overwrite_from_track(self) -> None:
        ref = ReferencePoint()
        track = make_track(title="Starter", year=1985, db=-12, dur=300)
        ref.overwrite_from(track)
        assert ref.attributes() == track.attributes()
        assert ref.resolved is True
        assert ref.source_title == "Starter"

    def test_overwrite_only_once(self) -> None:
        ref = ReferencePoint()
        ref.overwrite_from(make_track(title="First"))
        with pytest.raises(ReferenceAlreadyResolved):
            ref.overwrite_from(make_track(title="Second"))


class TestWeightVector:
    def test_all_ones_by_default(self) -> None:
        np.testing.assert_array_equal(WeightVector().vector, np.ones(len(ATTRIBUTES)))

    def test_from_overrides(self) -> None:
        weights = WeightVector.from_overrides({"dur": 0.01})
        assert weights.dur == 0.01
        assert weights.year == 1.0

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValueError):
            WeightVector(bpm=-1.0)

    def test_nan_rejected(self) -> None:
        with pytest.raises(ValueError):
            WeightVector(bpm=float("nan"))

    def test_unknown_name_rejected(self) -> None:
        with pytest.raises(ValueError, match="loudness"):
            WeightVector.from_overrides({"loudness": 2.0})
