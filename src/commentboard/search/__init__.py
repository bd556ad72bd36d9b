"""Text search over stored records."""

from commentboard.search.filter import filter_records

__all__ = ['filter_records']
