"""Core Layer — pure testing-technique subjects, no IO, no logging, no async.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or schemas/
    - All functions are pure and deterministic (repeated calls give identical results)

Design Decisions:
    - Functional core separated from imperative shell (ADR: narration lives in services/)
"""
