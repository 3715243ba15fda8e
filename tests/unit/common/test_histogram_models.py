# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import pydantic
import pytest

from promrate.common.enums import NoResultReason
from promrate.common.models import HistogramData, bucket_sort_key


def _hist(buckets: dict[str, float], sum_: float | None = None, count: float | None = None) -> HistogramData:
    return HistogramData(buckets=buckets, sum=sum_, count=count)


class TestHistogramData:
    """Test HistogramData validation and arithmetic."""

    def test_invalid_bucket_bound(self):
        with pytest.raises(pydantic.ValidationError, match="Invalid bucket upper bound"):
            _hist({"fast": 1.0, "+Inf": 2.0})

    @pytest.mark.parametrize("le", ["NaN", "inf", "-Inf", "Infinity"])  # fmt: skip
    def test_non_finite_bucket_bound_other_than_inf_bucket(self, le):
        with pytest.raises(pydantic.ValidationError, match="Invalid bucket upper bound"):
            _hist({le: 1.0, "+Inf": 2.0})

    def test_observation_count_prefers_count(self):
        assert _hist({"+Inf": 5.0}, count=7.0).observation_count == 7.0

    def test_observation_count_falls_back_to_inf_bucket(self):
        assert _hist({"1": 2.0, "+Inf": 5.0}).observation_count == 5.0

    def test_observation_count_without_count_or_inf_bucket(self):
        assert _hist({"1": 2.0}).observation_count == 0.0

    def test_sorted_buckets(self):
        histogram = _hist({"+Inf": 9.0, "10": 8.0, "0.5": 3.0, "2": 5.0})

        assert [le for le, _ in histogram.sorted_buckets()] == ["0.5", "2", "10", "+Inf"]

    @pytest.mark.parametrize(
        "le,expected",
        [("0.01", 0.01), ("1", 1.0), ("1e3", 1000.0), ("+Inf", float("inf"))],
    )  # fmt: skip
    def test_bucket_sort_key(self, le, expected):
        assert bucket_sort_key(le) == expected

    def test_scale_in_place(self):
        histogram = _hist({"1": 2.0, "+Inf": 4.0}, sum_=3.0, count=4.0)

        returned = histogram.scale(0.5)

        assert returned is histogram
        assert histogram.buckets == {"1": 1.0, "+Inf": 2.0}
        assert histogram.sum == 1.5
        assert histogram.count == 2.0

    def test_scale_keeps_missing_sum_and_count(self):
        histogram = _hist({"+Inf": 4.0}).scale(2.0)

        assert histogram.sum is None
        assert histogram.count is None

    def test_add_and_sub(self):
        histogram = _hist({"1": 2.0, "+Inf": 4.0}, sum_=3.0, count=4.0)
        other = _hist({"1": 1.0, "+Inf": 1.0}, sum_=0.5, count=1.0)

        histogram.add(other)
        assert histogram.buckets == {"1": 3.0, "+Inf": 5.0}
        assert histogram.sum == 3.5
        assert histogram.count == 5.0

        histogram.sub(other).sub(other)
        assert histogram.buckets == {"1": 1.0, "+Inf": 3.0}
        assert histogram.sum == 2.5
        assert histogram.count == 3.0

    def test_add_and_sub_keep_sum_and_count_missing_when_both_missing(self):
        histogram = _hist({"+Inf": 4.0})

        histogram.add(_hist({"+Inf": 1.0})).sub(_hist({"+Inf": 2.0}))

        assert histogram.buckets == {"+Inf": 3.0}
        assert histogram.sum is None
        assert histogram.count is None

    def test_add_and_sub_treat_one_missing_side_as_zero(self):
        histogram = _hist({"+Inf": 4.0}, sum_=3.0)

        histogram.sub(_hist({"+Inf": 1.0}, count=1.0))

        assert histogram.sum == 3.0
        assert histogram.count == -1.0

    def test_has_same_layout(self):
        histogram = _hist({"1": 2.0, "+Inf": 4.0})

        assert histogram.has_same_layout(_hist({"+Inf": 1.0, "1": 0.0}))
        assert not histogram.has_same_layout(_hist({"2": 2.0, "+Inf": 4.0}))
        assert not histogram.has_same_layout(_hist({"+Inf": 4.0}))


class TestDetectReset:
    """Test reset detection between adjacent histogram snapshots."""

    @pytest.mark.parametrize(
        "previous,current,expected",
        [
            ({"1": 1.0, "+Inf": 2.0}, {"1": 2.0, "+Inf": 3.0}, (False, False)),  # growth
            ({"1": 1.0, "+Inf": 2.0}, {"1": 1.0, "+Inf": 2.0}, (False, False)),  # unchanged
            ({"1": 5.0, "+Inf": 9.0}, {"1": 1.0, "+Inf": 1.0}, (True, False)),   # restart
            ({"1": 1.0, "+Inf": 9.0}, {"1": 1.0, "+Inf": 4.0}, (True, False)),   # count drop only
            ({"1": 5.0, "+Inf": 9.0}, {"1": 4.0, "+Inf": 10.0}, (False, True)),  # ambiguous
        ],
    )  # fmt: skip
    def test_detect_reset(self, previous, current, expected):
        assert _hist(current).detect_reset(_hist(previous)) == expected


class TestRateDelta:
    """Test HistogramData.rate_delta."""

    def test_gauge_delta(self):
        points = [_hist({"+Inf": 5.0}, 5.0, 5.0), _hist({"+Inf": 2.0}, 1.0, 2.0)]

        result, reason = HistogramData.rate_delta(points, is_counter=False)

        assert reason is None
        assert result.buckets == {"+Inf": -3.0}
        assert result.sum == -4.0
        assert result.count == -3.0

    def test_counter_resets(self):
        points = [
            _hist({"+Inf": 5.0}, 5.0, 5.0),
            _hist({"+Inf": 1.0}, 1.0, 1.0),
            _hist({"+Inf": 3.0}, 3.0, 3.0),
            _hist({"+Inf": 2.0}, 2.0, 2.0),
        ]

        result, reason = HistogramData.rate_delta(points, is_counter=True)

        # 2 - 5 + 5 + 3
        assert reason is None
        assert result.buckets == {"+Inf": 5.0}
        assert result.count == 5.0

    def test_layout_mismatch(self):
        points = [_hist({"+Inf": 1.0}), _hist({"1": 1.0, "+Inf": 2.0})]

        assert HistogramData.rate_delta(points, is_counter=False) == (
            None,
            NoResultReason.INCOMPATIBLE_BUCKET_LAYOUT,
        )

    def test_inputs_unchanged(self):
        first = _hist({"+Inf": 5.0}, 5.0, 5.0)
        last = _hist({"+Inf": 8.0}, 6.0, 8.0)

        result, _ = HistogramData.rate_delta([first, last], is_counter=True)
        result.scale(10.0)

        assert first == _hist({"+Inf": 5.0}, 5.0, 5.0)
        assert last == _hist({"+Inf": 8.0}, 6.0, 8.0)
