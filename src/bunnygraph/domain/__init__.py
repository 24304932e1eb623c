"""Domain layer — relation parsing, reduction and suggestion algorithms.

This layer depends only on the stdlib.
It must never import from services, infrastructure, commands, or config.
"""
