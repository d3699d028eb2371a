"""
Tests for diagnostic message formatting.
"""

import numpy as np
import pytest

from pystatguard.core.formatting import (
    format_function,
    format_matrix,
    format_message,
    format_value,
    full_message,
    qualify,
    type_name,
)


class TestFormatValue:

    @pytest.mark.parametrize("value, expected", [
        (1.5, "1.5"),
        (0.1, "0.1"),
        (float("nan"), "nan"),
        (float("inf"), "inf"),
        (float("-inf"), "-inf"),
        (3, "3"),
        (True, "1"),
        (np.int64(-4), "-4"),
        (np.uint32(7), "7"),
        (np.float32(0.25), "0.25"),
        (np.float64(np.nan), "nan"),
    ])
    def test_values(self, value, expected):
        assert format_value(value) == expected

    def test_huge_int_does_not_overflow(self):
        assert format_value(10 ** 400) == "1" + "0" * 400


class TestFormatMessage:

    def test_single_placeholder(self):
        assert format_message("x is %1%!", 2.0) == "x is 2.0!"

    def test_no_placeholder(self):
        assert format_message("plain", 2.0) == "plain"


class TestFormatFunction:

    def test_without_placeholder(self):
        assert format_function("normal_log", 1.0) == "normal_log"

    def test_placeholder_replaced_by_type(self):
        assert format_function("f<%1%>", np.float32(1.0)) == "f<float32>"
        assert format_function("f<%1%>", 1.0) == "f<float64>"
        assert format_function("f<%1%>", 3) == "f<int>"

    def test_type_name_bool(self):
        assert type_name(True) == "bool"


class TestFullMessage:

    def test_prefix(self):
        assert full_message("f", "y is %1%", 1.0) == "Error in function f: y is 1.0"


class TestQualify:

    def test_index(self):
        assert qualify("y", 2) == "y[2]"


class TestFormatMatrix:

    def test_contains_all_entries(self):
        text = format_matrix([[1.0, 2.0], [3.0, 4.0]])
        for entry in ("1.", "2.", "3.", "4."):
            assert entry in text
        assert "\n" in text
