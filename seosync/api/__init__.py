"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All JSON endpoints return structured responses; artifacts are plain text/XML

Design Decisions:
    - Thin routes delegate to core/services (ADR: impureim sandwich)
"""
