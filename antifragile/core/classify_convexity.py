"""Convexity Classification — discrete Jensen test of a payoff around an operating point.

Invariants:
    - All functions are PURE apart from DEBUG logging: no IO, no async, no state
    - classify() compares f(x-d) + f(x+d) with twin(f(x)) EXACTLY, no epsilon
    - classify() never raises on its own; payoff exceptions propagate untouched
    - A zero perturbation always yields ROBUST (all three points coincide)

Design Decisions:
    - Free functions over trait-style mixins: any object with payoff() qualifies
      (ADR: ExMA Functional Core)
    - Exact comparison is kept for floats: rounding noise near the linear boundary
      can flip the result. classify_with_tolerance() is the explicit opt-in escape hatch
    - The operating point and perturbation are combined with + and -, so the
      stressor type only needs those two operators
"""

import logging
from typing import Any

from antifragile.core.payoff_protocols import twin_of
from antifragile.core.triad import Triad

logger = logging.getLogger(__name__)


def _evaluate_triple(system: Any, at: Any, delta: Any) -> tuple[Any, Any]:
    """Return (f(x-d) + f(x+d), twin(f(x)))."""
    f_x = system.payoff(at)
    f_x_plus = system.payoff(at + delta)
    f_x_minus = system.payoff(at - delta)
    return f_x_plus + f_x_minus, twin_of(system, f_x)


def classify(system: Any, at: Any, delta: Any) -> Triad:
    """Classify a system on the Triad at operating point `at` with perturbation `delta`.

    sum > twin -> ANTIFRAGILE (convex), sum < twin -> FRAGILE (concave),
    otherwise ROBUST (linear).
    """
    total, center2 = _evaluate_triple(system, at, delta)
    if total > center2:
        triad = Triad.ANTIFRAGILE
    elif total < center2:
        triad = Triad.FRAGILE
    else:
        triad = Triad.ROBUST

    logger.debug(
        "Convexity test: sum=%r twin=%r -> %s", total, center2, triad.value,
        extra={
            "operating_point": at,
            "perturbation": delta,
            "classification": triad.value,
        },
    )
    return triad


def classify_with_tolerance(system: Any, at: Any, delta: Any, epsilon: Any) -> Triad:
    """Like classify(), but |sum - twin| <= epsilon counts as ROBUST.

    Requires the payoff type to support subtraction. Useful for float payoffs
    where exact equality is rare.
    """
    total, center2 = _evaluate_triple(system, at, delta)
    diff = total - center2 if total >= center2 else center2 - total

    if diff <= epsilon:
        triad = Triad.ROBUST
    elif total > center2:
        triad = Triad.ANTIFRAGILE
    else:
        triad = Triad.FRAGILE

    logger.debug(
        "Convexity test (epsilon=%r): diff=%r -> %s", epsilon, diff, triad.value,
        extra={
            "operating_point": at,
            "perturbation": delta,
            "classification": triad.value,
        },
    )
    return triad


def is_antifragile(system: Any, at: Any, delta: Any) -> bool:
    """Convexity test shortcut: classify(...) is ANTIFRAGILE."""
    return classify(system, at, delta) is Triad.ANTIFRAGILE


# ─── Two-Point Payoff Queries ────────────────────────────────────

def payoff_rises(system: Any, low: Any, high: Any) -> bool:
    """Does higher stress give a strictly better payoff? payoff(high) > payoff(low).

    A monotonicity check, not a curvature check: a concave learning curve
    can rise and still be FRAGILE.
    """
    return system.payoff(high) > system.payoff(low)


def payoff_within(system: Any, low: Any, high: Any, threshold: Any) -> bool:
    """True if |payoff(high) - payoff(low)| <= threshold."""
    payoff_low = system.payoff(low)
    payoff_high = system.payoff(high)
    if payoff_high >= payoff_low:
        return payoff_high - payoff_low <= threshold
    return payoff_low - payoff_high <= threshold
