"""Core engine: runtime driver, services and diagnostics."""
