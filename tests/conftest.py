from pathlib import Path
from typing import Generator

import pytest

from commentboard.cache import TagCache
from commentboard.mutations import comment_mutation, feedback_mutation
from commentboard.store import JsonRecordStore


@pytest.fixture
def comment_store(tmp_path: Path) -> JsonRecordStore:
    """Comment log in a throwaway directory; the file does not exist yet."""
    return JsonRecordStore(tmp_path / "comments.json", record_type=str)


@pytest.fixture
def feedback_store(tmp_path: Path) -> JsonRecordStore:
    return JsonRecordStore(tmp_path / "feedback.json", record_type=dict)


@pytest.fixture
def cache() -> Generator[TagCache, None, None]:
    tag_cache = TagCache()
    yield tag_cache
    tag_cache.close()


@pytest.fixture
def comment_handler(comment_store, cache):
    return comment_mutation(comment_store, cache)


@pytest.fixture
def feedback_handler(feedback_store, cache):
    return feedback_mutation(feedback_store, cache)


@pytest.fixture
def valid_feedback() -> dict:
    return {
        'name': 'Ada Lovelace',
        'email': 'ada@example.com',
        'feedback': 'The comment board works nicely.'
    }
