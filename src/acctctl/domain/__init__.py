"""Domain layer — account model, username and password rules.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
