"""Infrastructure layer — input sources and the NetworkX graph view.

This layer depends on stdlib and third-party libs (NetworkX).
It must never import from services, commands, or output.
"""
