"""Database primitives — declarative Base and standalone session factory."""
