"""Write operations and their results."""

from commentboard.mutations.commands import SubmitComment, SubmitFeedback
from commentboard.mutations.handler import (
    MutationHandler,
    comment_mutation,
    feedback_mutation,
)
from commentboard.mutations.results import (
    Committed,
    MutationResult,
    PersistenceFailed,
    ValidationFailed,
)

__all__ = [
    'SubmitComment',
    'SubmitFeedback',
    'MutationHandler',
    'comment_mutation',
    'feedback_mutation',
    'Committed',
    'MutationResult',
    'PersistenceFailed',
    'ValidationFailed',
]
