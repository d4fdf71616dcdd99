"""Pydantic Schemas — serialized forms of Triad and Verified.

Invariants:
    - Schemas validate at the system boundary (JSON in, JSON out)
    - Domain types from core/ used for enum fields
    - Disabling serialization never changes a classification

Design Decisions:
    - Separate from core: records are wire contracts, core types are behavior (ADR: DDD boundary)
"""
