"""Domain layer — thresholds, symbol sets, and name rule configuration.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, or config.
"""
