"""Case-insensitive substring search."""

from typing import List, Optional, Sequence


def filter_records(records: Sequence[str], query: Optional[str] = None) -> List[str]:
    """
    Filter records by case-insensitive substring containment.

    Args:
        records: Records in their stored order
        query: Text to look for; None or "" matches everything

    Returns:
        Matching records, original relative order preserved
    """
    if not query:
        return list(records)

    needle = query.lower()
    return [record for record in records if needle in record.lower()]
