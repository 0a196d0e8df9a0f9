"""Infrastructure layer — filesystem probing, namespaces, discovery, manifests.

This layer depends on the domain layer, stdlib, and third-party libs
(Markdown, Jinja2). It must never import from services, commands, or output.
"""
