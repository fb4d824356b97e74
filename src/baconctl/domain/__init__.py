"""Domain layer — errors, separation values, and game command parsing.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
