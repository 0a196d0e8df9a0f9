"""Domain layer — identifier rules, error kinds, and capability protocols.

This layer depends only on the standard library.
It must never import from services, infrastructure, commands, or config.
"""
