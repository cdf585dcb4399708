"""Domain layer — geometry value types, tokens, and resolvers.

This layer depends only on the stdlib.
It must never import from services, infrastructure, commands, or config.
"""
