"""
Tests for the range builders.

Validates:
  - value_range and stepped_value_range in all their argument forms
  - Unbounded ranges cut with take_n
  - Float ranges, negative steps and explicit dtypes
  - Contract violations for inverted, misaligned or zero-step ranges
  - enumerate_ as zip_ of a value range and its source
"""

import numpy as np
import pytest
from lazyrange import (
    enumerate_,
    filter_,
    stepped_value_range,
    take_n,
    to_list,
    value_range,
    zip_,
)


class TestValueRange:
    def test_bounded(self):
        assert list(value_range(0, 5)) == [0, 1, 2, 3, 4]
        assert len(value_range(0, 5)) == 5

    def test_empty(self):
        assert value_range(3, 3).empty()

    def test_from_start(self):
        assert value_range(5) | take_n(3) | to_list == [5, 6, 7]

    def test_unbounded_starts_at_lowest(self):
        lowest = int(np.iinfo(np.int64).min)
        assert value_range() | take_n(2) | to_list == [lowest, lowest + 1]

    def test_reversed(self):
        assert list(reversed(value_range(0, 3))) == [2, 1, 0]

    def test_indexing(self):
        view = value_range(10, 20)
        assert view[3] == 13
        assert view.back() == 19

    def test_values_are_python_ints(self):
        assert all(type(x) is int for x in value_range(0, 3))

    def test_explicit_dtype(self):
        view = value_range(0, 3, dtype=np.int8)
        assert list(view) == [0, 1, 2]
        with pytest.raises(OverflowError):
            value_range(0, 300, dtype=np.int8)

    def test_float_bounds(self):
        assert list(value_range(0.5, 3.5)) == [0.5, 1.5, 2.5]

    def test_inverted_bounds(self):
        with pytest.raises(AssertionError):
            value_range(3, 1)

    def test_too_many_arguments(self):
        with pytest.raises(TypeError):
            value_range(0, 1, 2)

    def test_bool_rejected(self):
        with pytest.raises(TypeError):
            value_range(True)

    def test_composes_with_adaptors(self):
        odd = value_range(0, 10) | filter_(lambda x: x % 2 == 1)
        assert list(odd) == [1, 3, 5, 7, 9]


class TestSteppedValueRange:
    def test_bounded(self):
        assert list(stepped_value_range(0, 10, 2)) == [0, 2, 4, 6, 8]

    def test_from_start(self):
        assert stepped_value_range(1, 3) | take_n(3) | to_list == [1, 4, 7]

    def test_step_only(self):
        lowest = int(np.iinfo(np.int64).min)
        assert stepped_value_range(3) | take_n(2) | to_list == [lowest, lowest + 3]

    def test_negative_step(self):
        assert list(stepped_value_range(10, 0, -2)) == [10, 8, 6, 4, 2]

    def test_float_step(self):
        assert list(stepped_value_range(0.0, 1.0, 0.25)) == [0.0, 0.25, 0.5, 0.75]

    def test_reversed(self):
        assert list(reversed(stepped_value_range(0, 9, 3))) == [6, 3, 0]

    def test_misaligned_end(self):
        with pytest.raises(AssertionError):
            stepped_value_range(0, 9, 2)

    def test_wrong_direction(self):
        with pytest.raises(AssertionError):
            stepped_value_range(0, 10, -2)

    def test_zero_step(self):
        with pytest.raises(AssertionError):
            stepped_value_range(0, 5, 0)

    def test_argument_count(self):
        with pytest.raises(TypeError):
            stepped_value_range()
        with pytest.raises(TypeError):
            stepped_value_range(0, 1, 2, 3)


class TestEnumerate:
    def test_pairs(self):
        assert enumerate_("abc") | to_list == list(enumerate("abc"))

    def test_start(self):
        assert enumerate_(["x", "y"], start=1) | to_list == [(1, "x"), (2, "y")]

    def test_equals_zip_with_value_range(self):
        data = [7, 3, 9, 1]
        expected = zip_(value_range(0, len(data)), data) | to_list
        assert enumerate_(data) | to_list == expected

    def test_of_adaptor_view(self):
        view = [5, 6, 7, 8] | filter_(lambda x: x > 6)
        assert enumerate_(view) | to_list == [(0, 7), (1, 8)]

    def test_empty(self):
        assert enumerate_([]) | to_list == []


class TestInexactFloatSteps:
    def test_runs_past_an_end_it_never_lands_on(self):
        values = stepped_value_range(0.0, 1.0, 0.1) | take_n(15) | to_list
        assert len(values) == 15
        assert values[-1] > 1.0

    def test_exact_float_steps_stop_at_end(self):
        assert len(stepped_value_range(0.0, 2.0, 0.5)) == 4
