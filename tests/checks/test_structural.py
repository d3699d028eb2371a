"""
Tests for structural checks.

Validates:
    - check_bounds ordering and sub-check short-circuiting
    - check_size_match message and offending value
    - check_cov_matrix / check_simplex return the validator's verdict unchanged
"""

import math
import warnings

import numpy as np
import pytest

from pystatguard import (
    CallbackPolicy,
    DimensionError,
    DomainError,
    DomainWarning,
    Slot,
    WarnPolicy,
    check_bounds,
    check_cov_matrix,
    check_simplex,
    check_size_match,
)
from pystatguard.core.violations import (
    VIOLATION_INVALID_COV_MATRIX,
    VIOLATION_INVALID_LOCATION_OR_BOUND,
    VIOLATION_INVALID_SIMPLEX,
    VIOLATION_ORDERING,
    VIOLATION_SIZE_MISMATCH,
)

NAN = float("nan")
INF = float("inf")


def recording_policy(messages):
    def callback(function, message, value):
        messages.append((message, value))
        return -7.0
    return CallbackPolicy(callback)


# ═══════════════════════════════════════════════════════════════════════
# check_bounds
# ═══════════════════════════════════════════════════════════════════════


class TestCheckBounds:

    def test_ordered_passes(self, slot, ignore):
        assert check_bounds("uniform_log", 0.0, 1.0, slot, ignore)
        assert not slot.written

    def test_reversed_fails_on_ordering(self, slot):
        messages = []
        assert not check_bounds("f", 5, 3, slot, recording_policy(messages))
        assert messages == [
            ("Error in function f: lower parameter is 5, but must be less than upper!", 5)
        ]
        assert slot.value == -7.0

    def test_equal_bounds_fail(self, slot, ignore):
        assert not check_bounds("f", 2.0, 2.0, slot, ignore)

    def test_ordering_violation_kind(self):
        with pytest.raises(DomainError) as exc_info:
            check_bounds("f", 5.0, 3.0, None)
        assert exc_info.value.violation == VIOLATION_ORDERING

    def test_lower_checked_first(self, slot):
        messages = []
        assert not check_bounds("f", NAN, INF, slot, recording_policy(messages))
        assert len(messages) == 1
        assert "Lower bound is nan" in messages[0][0]
        assert slot.writes == 1

    def test_upper_checked_before_ordering(self):
        with pytest.raises(DomainError, match="Upper bound is inf") as exc_info:
            check_bounds("f", 0.0, INF, None)
        assert exc_info.value.violation == VIOLATION_INVALID_LOCATION_OR_BOUND

    @pytest.mark.parametrize("lower, upper", [(NAN, 1.0), (0.0, INF), (5.0, 3.0)])
    def test_warning_points_at_caller(self, lower, upper):
        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter("always")
            assert not check_bounds("f", lower, upper, Slot(), WarnPolicy())
        assert len(w) == 1
        assert issubclass(w[0].category, DomainWarning)
        assert w[0].filename == __file__


# ═══════════════════════════════════════════════════════════════════════
# check_size_match
# ═══════════════════════════════════════════════════════════════════════


class TestCheckSizeMatch:

    def test_equal_passes(self, slot, ignore):
        assert check_size_match("f", 3, 3, slot, ignore)
        assert not slot.written

    def test_unequal_fails(self, slot):
        messages = []
        assert not check_size_match("f", 3, 4, slot, recording_policy(messages))
        (message, value), = messages
        assert "4" in message
        assert message.endswith("Found i=3, j=4")
        assert value == 3

    def test_violation_kind(self):
        with pytest.raises(DomainError) as exc_info:
            check_size_match("f", 2, 5, None)
        assert exc_info.value.violation == VIOLATION_SIZE_MISMATCH
        assert exc_info.value.value == 2


# ═══════════════════════════════════════════════════════════════════════
# check_cov_matrix
# ═══════════════════════════════════════════════════════════════════════


class TestCheckCovMatrix:

    def test_valid_passes(self, cov_matrix, slot, ignore):
        assert check_cov_matrix("multi_normal_log", cov_matrix, slot, ignore)
        assert not slot.written

    def test_asymmetric_fails(self, slot, ignore):
        Sigma = np.array([[1.0, 0.5], [0.0, 1.0]])
        assert not check_cov_matrix("f", Sigma, slot, ignore)
        assert math.isnan(slot.value)

    def test_message_dumps_matrix(self):
        Sigma = np.array([[2.0, 3.0], [3.0, 1.0]])  # indefinite
        with pytest.raises(DomainError) as exc_info:
            check_cov_matrix("multi_normal_log", Sigma, None)
        text = str(exc_info.value)
        assert "Sigma is not a valid covariance matrix" in text
        assert "symmetric and positive semi-definite" in text
        assert "[[2. 3.]" in text
        assert text.endswith("Sigma(0,0): 2.0")
        assert exc_info.value.value == 2.0
        assert exc_info.value.violation == VIOLATION_INVALID_COV_MATRIX

    @pytest.mark.parametrize("verdict", [True, False])
    def test_returns_validator_verdict(self, verdict, slot, ignore):
        Sigma = np.eye(2)
        assert check_cov_matrix("f", Sigma, slot, ignore, validator=lambda m: verdict) is verdict
        assert slot.written is (not verdict)

    def test_stub_true_accepts_invalid_matrix(self, slot, ignore):
        bad = np.array([[-1.0, 9.0], [0.0, -1.0]])
        assert check_cov_matrix("f", bad, slot, ignore, validator=lambda m: True)
        assert not slot.written

    def test_empty_matrix_on_failure(self, slot, ignore):
        with pytest.raises(DimensionError):
            check_cov_matrix("f", np.empty((0, 0)), slot, ignore)


# ═══════════════════════════════════════════════════════════════════════
# check_simplex
# ═══════════════════════════════════════════════════════════════════════


class TestCheckSimplex:

    def test_valid_passes(self, slot, ignore):
        assert check_simplex("categorical_log", np.array([0.2, 0.3, 0.5]), "theta", slot, ignore)
        assert not slot.written

    def test_bad_sum_fails(self, slot, ignore):
        assert not check_simplex("f", np.array([0.2, 0.3, 0.6]), "theta", slot, ignore)
        assert math.isnan(slot.value)

    def test_message(self):
        with pytest.raises(DomainError) as exc_info:
            check_simplex("f", [0.7, -0.2, 0.5], "theta", None)
        assert "theta is not a valid simplex" in str(exc_info.value)
        assert "The first element of the simplex is: 0.7." in str(exc_info.value)
        assert exc_info.value.value == 0.7
        assert exc_info.value.violation == VIOLATION_INVALID_SIMPLEX

    @pytest.mark.parametrize("verdict", [True, False])
    def test_returns_validator_verdict(self, verdict):
        result = Slot(1.0)
        theta = np.array([0.5, 0.5])
        policy = CallbackPolicy(lambda f, m, v: 0.0)
        assert check_simplex("f", theta, "theta", result, policy, validator=lambda v: verdict) is verdict
        assert result.value == (1.0 if verdict else 0.0)
