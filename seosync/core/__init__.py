"""Core Layer — pure domain logic, no document mutation, no network, no async.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - Functions are pure and deterministic; the one exception is
      SitemapRegistry, the single owner of mutable shared state

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
