"""Convexity classification — pure tests against known curves.

Tests cover:
    - Convex (x²) is ANTIFRAGILE, concave (√x, -x²) is FRAGILE, affine is ROBUST
    - Zero perturbation is always ROBUST
    - Exact comparison: tiny convexity is visible; tolerance variant hides it
    - Custom twin() is used for doubling; structural systems get r + r
    - Payoff exceptions propagate untouched
    - Two-point queries payoff_rises / payoff_within
    - Debug message arguments are only rendered when DEBUG is enabled
"""

import logging
import math
from decimal import Decimal
from fractions import Fraction

import pytest

from antifragile.core.classify_convexity import (
    classify,
    classify_with_tolerance,
    is_antifragile,
    payoff_rises,
    payoff_within,
)
from antifragile.core.payoff_protocols import Antifragile, PayoffFunction
from antifragile.core.triad import Triad


class ConvexFn(Antifragile[float, float]):
    """f(x) = x²"""
    def payoff(self, x):
        return x * x


class ConcaveFn(Antifragile[float, float]):
    """f(x) = √|x|"""
    def payoff(self, x):
        return math.sqrt(abs(x))


class LinearFn(Antifragile[float, float]):
    def __init__(self, slope, intercept):
        self.slope = slope
        self.intercept = intercept

    def payoff(self, x):
        return self.slope * x + self.intercept


class StructuralSquare:
    """No Antifragile base and no twin(): duck-typed system."""
    def payoff(self, x):
        return x * x


# ─── Known Curves ────────────────────────────────────────────────

def test_convex_is_antifragile():
    assert classify(ConvexFn(), 10.0, 1.0) is Triad.ANTIFRAGILE


def test_concave_sqrt_is_fragile():
    assert classify(ConcaveFn(), 10.0, 1.0) is Triad.FRAGILE


def test_negated_square_is_fragile():
    system = PayoffFunction(lambda x: -(x * x))
    assert classify(system, 10.0, 1.0) is Triad.FRAGILE
    assert classify(system, -3, 2) is Triad.FRAGILE


def test_linear_is_robust():
    assert classify(LinearFn(2.0, 5.0), 10.0, 1.0) is Triad.ROBUST


@pytest.mark.parametrize("slope,intercept,at,delta", [
    (Fraction(2), Fraction(5), Fraction(10), Fraction(1)),
    (Fraction(-3, 7), Fraction(1, 3), Fraction(-11, 2), Fraction(5, 9)),
    (0, 42, 7, 3),
    (17, -4, -100, 250),
])
def test_any_affine_function_is_robust(slope, intercept, at, delta):
    assert classify(LinearFn(slope, intercept), at, delta) is Triad.ROBUST


def test_classify_negative_stressor():
    assert classify(ConvexFn(), -10.0, 1.0) is Triad.ANTIFRAGILE


def test_classify_at_zero_does_not_raise():
    assert classify(ConvexFn(), 0.0, 0.1) is Triad.ANTIFRAGILE


def test_works_with_decimal_payoffs():
    system = PayoffFunction(lambda x: x * x * x)
    assert classify(system, Decimal("2.5"), Decimal("0.5")) is Triad.ANTIFRAGILE
    assert classify(system, Decimal("-2.5"), Decimal("0.5")) is Triad.FRAGILE


# ─── Zero Perturbation ───────────────────────────────────────────

@pytest.mark.parametrize("system", [
    ConvexFn(), ConcaveFn(), LinearFn(2.0, 5.0), StructuralSquare(),
])
def test_zero_delta_is_robust(system):
    assert classify(system, 10.0, 0.0) is Triad.ROBUST


# ─── Exact Comparison & Tolerance ────────────────────────────────

def test_exact_comparison_sees_tiny_convexity():
    nearly_linear = PayoffFunction(lambda x: 2.0 * x + 1e-10 * x * x)
    assert classify(nearly_linear, 10.0, 1.0) is Triad.ANTIFRAGILE


def test_tolerance_treats_tiny_convexity_as_robust():
    nearly_linear = PayoffFunction(lambda x: 2.0 * x + 1e-10 * x * x)
    assert classify_with_tolerance(nearly_linear, 10.0, 1.0, 1e-6) is Triad.ROBUST


def test_tolerance_still_separates_large_curvature():
    assert classify_with_tolerance(ConvexFn(), 10.0, 1.0, 1e-6) is Triad.ANTIFRAGILE
    assert classify_with_tolerance(ConcaveFn(), 10.0, 1.0, 1e-6) is Triad.FRAGILE


def test_zero_tolerance_matches_exact():
    for system in (ConvexFn(), ConcaveFn(), LinearFn(2.0, 5.0)):
        assert classify_with_tolerance(system, 10.0, 1.0, 0.0) is classify(system, 10.0, 1.0)


# ─── Doubling ────────────────────────────────────────────────────

def test_structural_system_without_twin_uses_self_addition():
    assert classify(StructuralSquare(), 10, 1) is Triad.ANTIFRAGILE


def test_protocol_subclass_inherits_default_twin():
    assert ConvexFn().twin(3.0) == 6.0


def test_custom_twin_is_used():
    calls = []

    class CountingTwin(Antifragile[int, int]):
        def payoff(self, x):
            return 5 * x

        def twin(self, r):
            calls.append(r)
            return 2 * r

    assert classify(CountingTwin(), 4, 1) is Triad.ROBUST
    assert calls == [20]


def test_payoff_function_custom_doubling():
    # A doubling that overstates the center flips a linear curve to FRAGILE
    system = PayoffFunction(lambda x: x, doubling=lambda r: 2 * r + 1)
    assert classify(system, 10, 1) is Triad.FRAGILE


# ─── Failure Propagation ─────────────────────────────────────────

def test_payoff_errors_propagate_untouched():
    system = PayoffFunction(lambda x: 1 / x)
    with pytest.raises(ZeroDivisionError):
        classify(system, 1, 1)


def test_evaluates_each_point_once():
    seen = []

    def record(x):
        seen.append(x)
        return x * x

    classify(PayoffFunction(record), 10, 2)
    assert sorted(seen) == [8, 10, 12]


# ─── Shortcuts & Two-Point Queries ───────────────────────────────

def test_is_antifragile_shortcut():
    assert is_antifragile(ConvexFn(), 10.0, 1.0)
    assert not is_antifragile(ConcaveFn(), 10.0, 1.0)
    assert not is_antifragile(LinearFn(2.0, 5.0), 10.0, 1.0)


def test_payoff_rises_is_monotonicity_not_curvature():
    assert payoff_rises(ConvexFn(), 1.0, 2.0)
    # concave but increasing: rises while still FRAGILE
    assert payoff_rises(ConcaveFn(), 1.0, 4.0)
    assert classify(ConcaveFn(), 10.0, 1.0) is Triad.FRAGILE
    assert not payoff_rises(LinearFn(-1.0, 0.0), 1.0, 2.0)


def test_payoff_within_threshold():
    constant = PayoffFunction(lambda _: 10.0)
    assert payoff_within(constant, 1.0, 100.0, 0.001)
    assert payoff_within(LinearFn(1.0, 0.0), 1.0, 2.0, 1.0)
    assert not payoff_within(LinearFn(1.0, 0.0), 1.0, 3.0, 1.0)
    # order of low/high does not matter
    assert payoff_within(LinearFn(-1.0, 0.0), 1.0, 2.0, 1.0)


# ─── Logging ─────────────────────────────────────────────────────

def test_classification_logged_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="antifragile.core.classify_convexity"):
        classify(ConvexFn(), 10.0, 1.0)
    record = caplog.records[-1]
    assert record.levelno == logging.DEBUG
    assert record.classification == "antifragile"
    assert record.operating_point == 10.0
    assert record.perturbation == 1.0


class ReprCounter:
    """Payoff value that records how often it is rendered."""
    renders = 0

    def __init__(self, v):
        self.v = v

    def __add__(self, other):
        return ReprCounter(self.v + other.v)

    def __sub__(self, other):
        return ReprCounter(self.v - other.v)

    def __gt__(self, other):
        return self.v > other.v

    def __lt__(self, other):
        return self.v < other.v

    def __ge__(self, other):
        return self.v >= other.v

    def __le__(self, other):
        return self.v <= other.v

    def __repr__(self):
        ReprCounter.renders += 1
        return f"ReprCounter({self.v})"


def test_payoffs_not_rendered_when_debug_disabled(caplog):
    ReprCounter.renders = 0
    system = PayoffFunction(lambda x: ReprCounter(x * x))
    with caplog.at_level(logging.INFO, logger="antifragile.core.classify_convexity"):
        assert classify(system, 10, 1) is Triad.ANTIFRAGILE
        assert classify_with_tolerance(system, 10, 1, ReprCounter(0)) is Triad.ANTIFRAGILE
    assert ReprCounter.renders == 0


def test_payoffs_rendered_in_debug_message(caplog):
    system = PayoffFunction(lambda x: ReprCounter(x * x))
    with caplog.at_level(logging.DEBUG, logger="antifragile.core.classify_convexity"):
        classify(system, 10, 1)
    assert caplog.records[-1].getMessage() == (
        "Convexity test: sum=ReprCounter(202) twin=ReprCounter(200) -> antifragile"
    )
