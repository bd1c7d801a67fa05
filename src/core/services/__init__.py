"""Orchestration on top of the wrappers (demo drivers, catalog)."""
