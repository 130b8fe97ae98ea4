"""Blog Platform API package.

Invariants:
    - Package root only declares the version (import side-effects prohibited)
"""

__version__ = "1.0.0"
