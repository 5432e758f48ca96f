"""Tests for ThresholdPair ingestion and ordering."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from identlint.domain.errors import InvalidConfigurationError
from identlint.domain.thresholds import Bound, ThresholdPair

ints = st.integers(min_value=-10_000, max_value=10_000)


class TestIngestInteger:
    def test_bare_int_sets_warning_and_clears_error(self) -> None:
        pair = ThresholdPair(warning=3, error=2).ingest(5, bound=Bound.MIN)
        assert pair == ThresholdPair(warning=5)
        assert pair.error is None

    def test_bool_rejected(self) -> None:
        with pytest.raises(InvalidConfigurationError):
            ThresholdPair(warning=3).ingest(True, bound=Bound.MIN)

    @pytest.mark.parametrize("value", ["3", 3.5, [3, 2], None])
    def test_other_shapes_rejected(self, value: object) -> None:
        with pytest.raises(InvalidConfigurationError, match="expected an integer"):
            ThresholdPair(warning=3).ingest(value, bound=Bound.MIN, key="min_length")


class TestIngestMapping:
    def test_merges_over_current_values(self) -> None:
        pair = ThresholdPair(warning=3, error=2).ingest({"warning": 4}, bound=Bound.MIN)
        assert pair == ThresholdPair(warning=4, error=2)

    def test_error_only(self) -> None:
        pair = ThresholdPair(warning=40).ingest({"error": 60}, bound=Bound.MAX)
        assert pair == ThresholdPair(warning=40, error=60)

    def test_explicit_none_clears_error(self) -> None:
        pair = ThresholdPair(warning=3, error=2).ingest({"error": None}, bound=Bound.MIN)
        assert pair.error is None

    def test_unknown_keys_rejected(self) -> None:
        with pytest.raises(InvalidConfigurationError, match="unexpected threshold keys"):
            ThresholdPair(warning=3).ingest({"warn": 4}, bound=Bound.MIN)

    def test_non_int_level_rejected(self) -> None:
        with pytest.raises(InvalidConfigurationError, match="integers"):
            ThresholdPair(warning=3).ingest({"warning": "4"}, bound=Bound.MIN)

    @given(w=ints, e=ints)
    def test_min_bound_ordering(self, w: int, e: int) -> None:
        start = ThresholdPair(warning=0)
        if e <= w:
            pair = start.ingest({"warning": w, "error": e}, bound=Bound.MIN)
            assert (pair.warning, pair.error) == (w, e)
        else:
            with pytest.raises(InvalidConfigurationError):
                start.ingest({"warning": w, "error": e}, bound=Bound.MIN)

    @given(w=ints, e=ints)
    def test_max_bound_ordering(self, w: int, e: int) -> None:
        start = ThresholdPair(warning=0)
        if e >= w:
            pair = start.ingest({"warning": w, "error": e}, bound=Bound.MAX)
            assert (pair.warning, pair.error) == (w, e)
        else:
            with pytest.raises(InvalidConfigurationError):
                start.ingest({"warning": w, "error": e}, bound=Bound.MAX)

    def test_ordering_checked_after_merge(self) -> None:
        """Lowering the warning below an existing error fails for a min bound."""
        with pytest.raises(InvalidConfigurationError, match="must not exceed") as info:
            ThresholdPair(warning=3, error=2).ingest({"warning": 1}, bound=Bound.MIN, key="min_length")
        assert info.value.key == "min_length"


class TestThresholdPair:
    def test_equality_is_structural(self) -> None:
        assert ThresholdPair(warning=3, error=2) == ThresholdPair(warning=3, error=2)
        assert ThresholdPair(warning=3) != ThresholdPair(warning=3, error=3)
        assert hash(ThresholdPair(warning=3)) == hash(ThresholdPair(warning=3))

    def test_short_description(self) -> None:
        assert ThresholdPair(warning=3).short_description == "w: 3"
        assert ThresholdPair(warning=3, error=2).short_description == "w: 3, e: 2"

    def test_check_order_allows_equal_levels(self) -> None:
        pair = ThresholdPair(warning=5, error=5)
        assert pair.check_order(Bound.MIN) is pair
        assert pair.check_order(Bound.MAX) is pair

    def test_bound_is_required(self) -> None:
        with pytest.raises(TypeError):
            ThresholdPair(warning=40).ingest({"error": 60})  # type: ignore[call-arg]

    def test_max_bound_accepts_looser_error(self) -> None:
        """The same value that a min bound rejects is valid for a max bound."""
        pair = ThresholdPair(warning=40).ingest({"error": 60}, bound=Bound.MAX, key="max_length")
        assert pair == ThresholdPair(warning=40, error=60)
        with pytest.raises(InvalidConfigurationError):
            ThresholdPair(warning=40).ingest({"error": 60}, bound=Bound.MIN, key="min_length")
