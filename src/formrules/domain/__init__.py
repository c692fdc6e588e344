"""Domain layer — validation results, primitives, rules and form schemas.

This layer depends only on the standard library.
It must never import from services, commands, config or output.
"""
