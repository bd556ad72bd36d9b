"""Schemas for the comment and feedback forms."""

from commentboard.validation.constraints import (
    EMAIL_REGEX,
    MaxLength,
    MinLength,
    Pattern,
    Required,
)


COMMENT_MAX_LENGTH = 1000

COMMENT_SCHEMA = {
    'comment': [
        Required('Comment'),
        MaxLength('Comment', COMMENT_MAX_LENGTH),
    ],
}

FEEDBACK_SCHEMA = {
    'name': [
        Required('Name'),
        MinLength('Name', 2),
        MaxLength('Name', 100),
    ],
    'email': [
        Pattern(EMAIL_REGEX, 'Invalid email format'),
    ],
    'feedback': [
        Required('Feedback'),
        MinLength('Feedback', 10),
        MaxLength('Feedback', 1000),
    ],
}
