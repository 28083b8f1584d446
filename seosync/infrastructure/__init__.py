"""Infrastructure Layer — concrete adapters for the core ports."""
