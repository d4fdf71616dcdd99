"""Triad — the three-way classification of a system's response to volatility.

Invariants:
    - Exactly three members, declared in desirability order: FRAGILE < ROBUST < ANTIFRAGILE
    - Byte encoding FRAGILE=0, ROBUST=1, ANTIFRAGILE=2 is bijective; anything else is rejected
    - String encoding is the lowercase canonical name, parsed ASCII case-insensitively
    - Default is ROBUST ("no evidence either way")
    - Members are immutable singletons, safe to share

Design Decisions:
    - str Enum: serializes to JSON as its canonical name without custom encoders
    - Explicit mapping tables over IntEnum: no implicit int coercion can smuggle in
      out-of-range values (ADR: reject, never coerce)
    - Ordering overridden explicitly: str ordering would sort alphabetically.
      Comparing with a non-Triad raises TypeError rather than returning
      NotImplemented, which would fall through to str comparison
"""

from enum import Enum

from antifragile.core.errors import InvalidTriadValue, ParseTriadError


class Triad(str, Enum):
    """Response to volatility, ordered by desirability."""
    FRAGILE = "fragile"          # concave response, harmed by volatility
    ROBUST = "robust"            # linear response, unaffected
    ANTIFRAGILE = "antifragile"  # convex response, benefits from volatility

    # ─── Construction ────────────────────────────────────────────

    @classmethod
    def default(cls) -> "Triad":
        return cls.ROBUST

    @classmethod
    def all(cls) -> tuple["Triad", ...]:
        """All members in desirability order: (FRAGILE, ROBUST, ANTIFRAGILE)."""
        return (cls.FRAGILE, cls.ROBUST, cls.ANTIFRAGILE)

    @classmethod
    def from_byte(cls, value: int) -> "Triad":
        """Inverse of to_byte(). Raises InvalidTriadValue for anything but 0, 1, 2."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidTriadValue(value)
        triad = _BYTE_TO_TRIAD.get(value)
        if triad is None:
            raise InvalidTriadValue(value)
        return triad

    @classmethod
    def parse(cls, value: str) -> "Triad":
        """Case-insensitive parse of a canonical name. Raises ParseTriadError otherwise.

        Only ASCII letter-casing is folded, so look-alike Unicode spellings
        are rejected rather than normalized.
        """
        if not isinstance(value, str) or not value.isascii():
            raise ParseTriadError(value)
        triad = _NAME_TO_TRIAD.get(value.lower())
        if triad is None:
            raise ParseTriadError(value)
        return triad

    # ─── Conversion ──────────────────────────────────────────────

    @property
    def rank(self) -> int:
        """Desirability rank: FRAGILE=0, ROBUST=1, ANTIFRAGILE=2."""
        return _TRIAD_TO_BYTE[self]

    def to_byte(self) -> int:
        return _TRIAD_TO_BYTE[self]

    def as_str(self) -> str:
        """Lowercase canonical name, the inverse of parse()."""
        return self.value

    def __str__(self) -> str:
        return _DISPLAY[self]

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

    # ─── Predicates ──────────────────────────────────────────────

    @property
    def is_fragile(self) -> bool:
        return self is Triad.FRAGILE

    @property
    def is_robust(self) -> bool:
        return self is Triad.ROBUST

    @property
    def is_antifragile(self) -> bool:
        return self is Triad.ANTIFRAGILE

    def opposite(self) -> "Triad":
        """ANTIFRAGILE <-> FRAGILE; ROBUST is its own opposite."""
        return _OPPOSITE[self]

    # ─── Ordering ────────────────────────────────────────────────

    def __lt__(self, other):
        if not isinstance(other, Triad):
            _reject_comparison(other)
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, Triad):
            _reject_comparison(other)
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, Triad):
            _reject_comparison(other)
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, Triad):
            _reject_comparison(other)
        return self.rank >= other.rank


# ─── Mapping Tables ──────────────────────────────────────────────

_TRIAD_TO_BYTE: dict[Triad, int] = {
    Triad.FRAGILE: 0,
    Triad.ROBUST: 1,
    Triad.ANTIFRAGILE: 2,
}
_BYTE_TO_TRIAD: dict[int, Triad] = {v: k for k, v in _TRIAD_TO_BYTE.items()}

_NAME_TO_TRIAD: dict[str, Triad] = {t.value: t for t in Triad}

_DISPLAY: dict[Triad, str] = {
    Triad.FRAGILE: "Fragile (harmed by volatility)",
    Triad.ROBUST: "Robust (unaffected by volatility)",
    Triad.ANTIFRAGILE: "Antifragile (benefits from volatility)",
}

_OPPOSITE: dict[Triad, Triad] = {
    Triad.FRAGILE: Triad.ANTIFRAGILE,
    Triad.ROBUST: Triad.ROBUST,
    Triad.ANTIFRAGILE: Triad.FRAGILE,
}


def _reject_comparison(other: object) -> None:
    raise TypeError(
        f"cannot order Triad against {type(other).__name__}: {other!r} "
        f"(parse it with Triad.parse first)"
    )
