"""Core: configuration, domain models, errors and orchestration.

The core does not talk HTTP itself; it drives the adapters.
"""
