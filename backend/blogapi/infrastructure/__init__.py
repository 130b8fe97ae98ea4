"""Infrastructure Layer — database, logging, credentials and the OAuth provider.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Library exceptions are mapped to BlogError subclasses at this boundary
"""
