"""Named-field access, visiting and JSON serialization for plain objects."""

__version__ = "0.1.0"
__all__ = ["fields", "serialize"]