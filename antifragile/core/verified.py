"""Verified — a system bundled with its one-time Triad classification.

Invariants:
    - classification is computed exactly once, in check(); never recomputed or mutated
    - The wrapper owns its system: callers hand it over and read it back via .inner
    - is_antifragile() and is_stable() are mutually exclusive
    - gains_from_stress() is an alias of is_antifragile()

Design Decisions:
    - Frozen dataclass: memoized, not lazy; reassignment raises FrozenInstanceError
    - No re_verify(): a new operating point means a new Verified (ADR: immutable record)
    - payoff()/twin() delegate to the inner system, so a Verified is itself classifiable
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from antifragile.core.classify_convexity import classify
from antifragile.core.payoff_protocols import twin_of
from antifragile.core.triad import Triad

SystemT = TypeVar("SystemT")


@dataclass(frozen=True)
class Verified(Generic[SystemT]):
    """Immutable record of a system, the point it was tested at, and the result.

    Build one with check(), which runs the convexity test, or with
    schemas.classification.record_to_verified(), which restores a stored one.
    The field constructor is internal to those two paths: it stores whatever
    classification it is handed and does not verify it.
    """
    inner: SystemT
    operating_point: Any
    perturbation: Any
    classification: Triad

    @classmethod
    def check(cls, system: SystemT, at: Any, delta: Any) -> "Verified[SystemT]":
        """Classify `system` at (at, delta) and bundle it with the result."""
        return cls(
            inner=system,
            operating_point=at,
            perturbation=delta,
            classification=classify(system, at, delta),
        )

    # ─── Queries ─────────────────────────────────────────────────

    def is_antifragile(self) -> bool:
        return self.classification is Triad.ANTIFRAGILE

    def is_fragile(self) -> bool:
        return self.classification is Triad.FRAGILE

    def is_robust(self) -> bool:
        return self.classification is Triad.ROBUST

    def is_stable(self) -> bool:
        """True iff the system was classified ROBUST (linear response)."""
        return self.is_robust()

    def gains_from_stress(self) -> bool:
        """Alias of is_antifragile(): convex payoff gains from added volatility."""
        return self.is_antifragile()

    def still_holds(self, at: Any, delta: Any) -> bool:
        """Would classifying at (at, delta) reproduce the stored result? Does not mutate."""
        return classify(self.inner, at, delta) is self.classification

    # ─── Delegation ──────────────────────────────────────────────

    def payoff(self, stressor: Any) -> Any:
        return self.inner.payoff(stressor)  # type: ignore[attr-defined]

    def twin(self, r: Any) -> Any:
        return twin_of(self.inner, r)
