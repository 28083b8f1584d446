"""Service Layer — components that apply core results through the ports.

Invariants:
    - Services receive ports and the registry by injection; no globals
    - Every public operation returns a Result; nothing raises past the boundary

Design Decisions:
    - One class per component (meta tags, schemas, health, orchestration):
      small classes with explicit collaborators (ADR: no god objects)
"""
