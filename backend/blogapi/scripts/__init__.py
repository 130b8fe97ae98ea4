"""Operational scripts exposed as console commands."""
