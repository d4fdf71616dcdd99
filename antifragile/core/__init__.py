"""Core Layer — pure classification logic, no IO, no async, no configuration.

Invariants:
    - No module in core/ imports from schemas/, infrastructure/, or config
    - All functions are pure and deterministic given a deterministic payoff()

Design Decisions:
    - Functional core separated from serialization and logging setup (ADR: ExMA impureim sandwich)
"""
