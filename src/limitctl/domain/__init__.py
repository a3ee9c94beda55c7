"""Domain layer — calendar windows, tiers, and the prescription engine.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
