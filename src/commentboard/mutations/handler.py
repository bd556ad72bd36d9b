"""Validate → persist → invalidate orchestration for a single write."""

from typing import Any, Callable, Dict, Mapping, Optional, Sequence, Union

from commentboard.cache import COMMENTS_TAG, FEEDBACK_TAG, TagCache
from commentboard.lib.exceptions import (
    CacheException,
    PersistenceException,
    format_exception_details,
)
from commentboard.mutations.commands import SubmitComment, SubmitFeedback
from commentboard.mutations.results import (
    Committed,
    MutationResult,
    PersistenceFailed,
    ValidationFailed,
)
from commentboard.store import JsonRecordStore
from commentboard.utils.logger import setup_logger
from commentboard.validation import (
    COMMENT_SCHEMA,
    FEEDBACK_SCHEMA,
    Schema,
    ValidationFailure,
    validate,
)

mutation_logger = setup_logger("commentboard.mutations")

Command = Union[SubmitComment, SubmitFeedback]


class MutationHandler:
    """Runs one kind of write against one store.

    Invalidation happens only after the append returned, and happens for
    every declared tag on every successful append.
    """

    def __init__(
        self,
        name: str,
        schema: Schema,
        store: JsonRecordStore,
        cache: TagCache,
        tags: Sequence[str],
        to_record: Callable[[Dict[str, str]], Any],
    ):
        self.name = name
        self.schema = schema
        self.store = store
        self.cache = cache
        self.tags = tuple(tags)
        self.to_record = to_record

    def handle(self, command: Command) -> MutationResult:
        """Submit a typed request object."""
        return self.submit(command.as_form())

    def submit(self, raw_form: Mapping[str, Optional[str]]) -> MutationResult:
        """
        Validate, persist and invalidate.

        Args:
            raw_form: Submitted form fields

        Returns:
            ValidationFailed if input was rejected (store untouched),
            PersistenceFailed if the append failed,
            Committed otherwise
        """
        outcome = validate(self.schema, raw_form)
        if isinstance(outcome, ValidationFailure):
            mutation_logger.info("validation_failed", extra={
                "data": {"mutation": self.name, "fields": sorted(outcome.field_errors)}
            })
            return ValidationFailed(
                errors=outcome.field_errors,
                values=outcome.original_values
            )

        record = self.to_record(outcome.data)

        try:
            self.store.append(record)
        except PersistenceException as e:
            mutation_logger.error("persistence_failed", extra={
                "data": {"mutation": self.name, "error": format_exception_details(e)}
            })
            return PersistenceFailed(reason=e.message)

        stale_tags = []
        for tag in self.tags:
            try:
                self.cache.invalidate(tag)
            except CacheException as e:
                stale_tags.append(tag)
                mutation_logger.error("cache_invalidation_failed", extra={
                    "data": {"mutation": self.name, "tag": tag, "error": e.message}
                })

        mutation_logger.info("mutation_committed", extra={
            "data": {"mutation": self.name, "tags": list(self.tags)}
        })
        return Committed(record=record, stale_tags=tuple(stale_tags))


def comment_mutation(store: JsonRecordStore, cache: TagCache) -> MutationHandler:
    """Handler for the plain comment form.

    The stored comment is the submitted text with leading and trailing
    whitespace removed.
    """
    return MutationHandler(
        name="submit_comment",
        schema=COMMENT_SCHEMA,
        store=store,
        cache=cache,
        tags=[COMMENTS_TAG],
        to_record=lambda data: data['comment'],
    )


def feedback_mutation(store: JsonRecordStore, cache: TagCache) -> MutationHandler:
    """Handler for the validated feedback form; stores the normalized fields."""
    return MutationHandler(
        name="submit_feedback",
        schema=FEEDBACK_SCHEMA,
        store=store,
        cache=cache,
        tags=[FEEDBACK_TAG],
        to_record=lambda data: {
            'name': data['name'],
            'email': data['email'],
            'feedback': data['feedback'],
        },
    )
