"""PyQt6 host for the piece board."""
