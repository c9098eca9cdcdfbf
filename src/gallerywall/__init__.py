"""Gallery wall layout recommender."""

__version__ = "0.1.0"
