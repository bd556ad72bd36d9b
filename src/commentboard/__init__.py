"""Comment board service: append-only comment log with tag-based cache invalidation."""

__version__ = "1.0.0"
