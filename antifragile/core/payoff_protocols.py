"""Payoff Protocols — the contract a system satisfies to be classified.

Invariants:
    - payoff() is pure and deterministic for the duration of one evaluation triple
    - twin(r) defaults to r + r; overrides must return a value equal to r + r
    - Only addition and ordering are required of the payoff type (no numeric tower)

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy required
      (ADR: ExMA anti-pattern). Subclassing the Protocol explicitly inherits the
      default twin(); structural implementers get the same default from the classifier
    - PayoffFunction adapter: plain callables are first-class systems without
      writing a class per curve
"""

from dataclasses import dataclass
from typing import Any, Callable, Protocol, TypeVar

StressorT = TypeVar("StressorT")
StressorT_contra = TypeVar("StressorT_contra", contravariant=True)
PayoffT = TypeVar("PayoffT")


class Antifragile(Protocol[StressorT_contra, PayoffT]):
    """Structural contract for systems analyzed on the Triad."""

    def payoff(self, stressor: StressorT_contra) -> PayoffT:
        """Outcome the system produces under the given stress level."""
        ...

    def twin(self, r: PayoffT) -> PayoffT:
        """The payoff added to itself, compared against f(x-d) + f(x+d)."""
        return r + r  # type: ignore[operator]


def twin_of(system: Any, r: Any) -> Any:
    """Double a payoff using the system's twin() when it has one, else r + r."""
    twin = getattr(system, "twin", None)
    if twin is None:
        return r + r
    return twin(r)


@dataclass(frozen=True)
class PayoffFunction(Antifragile[StressorT, PayoffT]):
    """Adapter exposing a plain callable as a payoff-capable system."""
    fn: Callable[[StressorT], PayoffT]
    doubling: Callable[[PayoffT], PayoffT] | None = None

    def payoff(self, stressor: StressorT) -> PayoffT:
        return self.fn(stressor)

    def twin(self, r: PayoffT) -> PayoffT:
        if self.doubling is not None:
            return self.doubling(r)
        return r + r  # type: ignore[operator]
