"""Domain layer — dispatch rules, gauge model, and draw-command builders.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
