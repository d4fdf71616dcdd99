"""Classification Schemas — Pydantic records for Triad and Verified serialization.

Invariants:
    - A Triad serializes as its lowercase canonical name and nothing else
    - Triad fields accept the canonical names in any ASCII casing; all else is a ValidationError
    - TriadRecord.rank always agrees with TriadRecord.classification; bool is not a rank
    - Stressor values keep their type across a round trip when the record is
      parametrized with it, e.g. VerifiedRecord[System, Decimal]
    - record_to_verified() restores the stored classification, it never reclassifies
    - Every entry point checks Settings.serialization_enabled first

Design Decisions:
    - Reuse Triad.parse as a BeforeValidator: one parsing rule for strings and JSON
      (ADR: serialization mirrors the string form one-to-one)
    - Generic VerifiedRecord: the system's own pydantic model decides how it is encoded
    - Toggle checked at call time, not import time: the module always imports cleanly
"""

from typing import Annotated, Any, Generic, TypeVar

from pydantic import (
    BaseModel, BeforeValidator, ConfigDict, StrictInt, TypeAdapter, model_validator,
)

from antifragile.config import get_settings
from antifragile.core.errors import SerializationDisabledError
from antifragile.core.triad import Triad
from antifragile.core.verified import Verified

SystemT = TypeVar("SystemT")
StressorT = TypeVar("StressorT")


def _coerce_triad(value: Any) -> Any:
    """Parse strings case-insensitively; leave other inputs to enum validation."""
    if isinstance(value, str) and not isinstance(value, Triad):
        return Triad.parse(value)
    return value


TriadField = Annotated[Triad, BeforeValidator(_coerce_triad)]

_TRIAD_ADAPTER: TypeAdapter[Triad] = TypeAdapter(TriadField)


def _require_serialization(operation: str) -> None:
    if not get_settings().serialization_enabled:
        raise SerializationDisabledError(operation)


# ─── Records ─────────────────────────────────────────────────────

class TriadRecord(BaseModel):
    """A classification with its numeric rank, for consumers that sort by number."""
    model_config = ConfigDict(frozen=True)

    classification: TriadField
    rank: StrictInt

    @model_validator(mode="after")
    def check_rank_matches(self) -> "TriadRecord":
        if self.rank != self.classification.rank:
            raise ValueError(
                f"rank {self.rank} does not match classification "
                f"{self.classification.value!r} (rank {self.classification.rank})"
            )
        return self

    @classmethod
    def from_triad(cls, triad: Triad) -> "TriadRecord":
        return cls(classification=triad, rank=triad.rank)


class VerifiedRecord(BaseModel, Generic[SystemT, StressorT]):
    """Serialized Verified: the system, where it was tested, and the stored result."""
    model_config = ConfigDict(frozen=True)

    system: SystemT
    operating_point: StressorT
    perturbation: StressorT
    classification: TriadField


# ─── Entry Points ────────────────────────────────────────────────

def dump_triad(triad: Triad) -> str:
    """Triad -> JSON string, e.g. '"antifragile"'."""
    _require_serialization("dump_triad")
    return _TRIAD_ADAPTER.dump_json(triad).decode()


def load_triad(data: str | bytes) -> Triad:
    """JSON string -> Triad. Raises pydantic.ValidationError on unknown names."""
    _require_serialization("load_triad")
    return _TRIAD_ADAPTER.validate_json(data)


def verified_to_record(verified: Verified[SystemT]) -> VerifiedRecord[SystemT, Any]:
    _require_serialization("verified_to_record")
    return VerifiedRecord(
        system=verified.inner,
        operating_point=verified.operating_point,
        perturbation=verified.perturbation,
        classification=verified.classification,
    )


def record_to_verified(record: VerifiedRecord[SystemT, Any]) -> Verified[SystemT]:
    """Rebuild a Verified from a record without rerunning the convexity test."""
    _require_serialization("record_to_verified")
    return Verified(
        inner=record.system,
        operating_point=record.operating_point,
        perturbation=record.perturbation,
        classification=record.classification,
    )
