"""Grid-map validation, ray casting, minimap drawing and text helpers for a first-person maze."""

__version__ = "0.1.0"