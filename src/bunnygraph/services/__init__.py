"""Service layer — orchestration returning ServiceResult.

Services may import from domain, infrastructure and config.
They must never import from commands or output.
"""
