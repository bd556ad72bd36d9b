"""Tag-based cache invalidation."""

from commentboard.cache.tag_cache import TagCache

COMMENTS_TAG = "comments"
FEEDBACK_TAG = "feedback"

__all__ = ['TagCache', 'COMMENTS_TAG', 'FEEDBACK_TAG']
