"""Tests for the validation engine and form schemas."""

import pytest

from commentboard.validation import (
    COMMENT_SCHEMA,
    FEEDBACK_SCHEMA,
    ValidationFailure,
    ValidationSuccess,
    validate,
)
from commentboard.validation.constraints import MaxLength, MinLength, Pattern, Required


def test_valid_feedback_passes(valid_feedback):
    """Test that a fully valid submission returns success with no errors."""
    result = validate(FEEDBACK_SCHEMA, valid_feedback)

    assert isinstance(result, ValidationSuccess)
    assert result.ok is True
    assert result.data == valid_feedback


@pytest.mark.parametrize(
    "name,feedback",
    [
        ("Al", "x" * 10),
        ("n" * 100, "x" * 1000),
        ("Bo", "ten chars!"),
    ],
)
def test_boundary_lengths_pass(name, feedback):
    """Test that inclusive length bounds are accepted."""
    result = validate(FEEDBACK_SCHEMA, {'name': name, 'email': 'a@b.co', 'feedback': feedback})

    assert isinstance(result, ValidationSuccess)


def test_values_are_trimmed_when_normalized():
    """Test that normalized data has surrounding whitespace removed."""
    raw = {'name': '  Ada  ', 'email': ' ada@example.com ', 'feedback': '  long enough text  '}

    result = validate(FEEDBACK_SCHEMA, raw)

    assert result.data == {'name': 'Ada', 'email': 'ada@example.com', 'feedback': 'long enough text'}


@pytest.mark.parametrize(
    "field_name,bad_value,expected_message",
    [
        ('name', 'A', 'Name must be at least 2 characters'),
        ('name', 'n' * 101, 'Name must not exceed 100 characters'),
        ('email', 'notanemail', 'Invalid email format'),
        ('email', 'user@.com', 'Invalid email format'),
        ('feedback', 'short', 'Feedback must be at least 10 characters'),
        ('feedback', 'x' * 1001, 'Feedback must not exceed 1000 characters'),
    ],
)
def test_single_violation_reports_only_that_field(valid_feedback, field_name, bad_value, expected_message):
    """Test that one bad field yields errors for that field only and echoes input."""
    raw = dict(valid_feedback)
    raw[field_name] = bad_value

    result = validate(FEEDBACK_SCHEMA, raw)

    assert isinstance(result, ValidationFailure)
    assert list(result.field_errors) == [field_name]
    assert result.field_errors[field_name] == [expected_message]
    assert result.original_values == raw


def test_all_three_fields_fail():
    """Test that every failing field is reported with the raw values echoed."""
    raw = {'name': 'A', 'email': 'bad', 'feedback': 'short'}

    result = validate(FEEDBACK_SCHEMA, raw)

    assert isinstance(result, ValidationFailure)
    assert result.field_errors == {
        'name': ['Name must be at least 2 characters'],
        'email': ['Invalid email format'],
        'feedback': ['Feedback must be at least 10 characters'],
    }
    assert result.original_values == {'name': 'A', 'email': 'bad', 'feedback': 'short'}


def test_original_values_are_not_trimmed():
    """Test that echoed values are verbatim, whitespace included."""
    raw = {'name': ' A ', 'email': 'ada@example.com', 'feedback': ' short '}

    result = validate(FEEDBACK_SCHEMA, raw)

    assert isinstance(result, ValidationFailure)
    assert result.original_values['name'] == ' A '
    assert result.original_values['feedback'] == ' short '


@pytest.mark.parametrize(
    "name,feedback",
    [
        (' A', 'x' * 10),
        ('A ', ' ' + 'x' * 9),
        (' ' + 'n' * 99, 'x' * 999 + ' '),
    ],
)
def test_length_bounds_count_surrounding_whitespace(name, feedback):
    """Test that length checks see the value as submitted, whitespace included."""
    result = validate(FEEDBACK_SCHEMA, {'name': name, 'email': 'a@b.co', 'feedback': feedback})

    assert isinstance(result, ValidationSuccess)
    assert result.data['name'] == name.strip()


def test_padding_can_push_value_over_max_length():
    result = validate(FEEDBACK_SCHEMA, {'name': ' ' + 'n' * 100, 'email': 'a@b.co', 'feedback': 'x' * 10})

    assert result.field_errors == {'name': ['Name must not exceed 100 characters']}


def test_whitespace_only_name_is_required():
    """Test that blank padding long enough for MinLength is still rejected."""
    result = validate(FEEDBACK_SCHEMA, {'name': '   ', 'email': 'a@b.co', 'feedback': 'x' * 10})

    assert isinstance(result, ValidationFailure)
    assert result.field_errors == {'name': ['Name is required']}


def test_all_violations_for_a_field_are_collected():
    """Test that constraints on one field are evaluated independently."""
    schema = {'code': [Required('Code'), MinLength('Code', 3), Pattern(r'^\d+$', 'Code must be numeric')]}

    result = validate(schema, {'code': ''})

    assert result.field_errors['code'] == [
        'Code is required',
        'Code must be at least 3 characters',
        'Code must be numeric',
    ]


def test_missing_field_is_treated_as_empty():
    """Test that absent fields fail their constraints instead of raising."""
    result = validate(COMMENT_SCHEMA, {})

    assert isinstance(result, ValidationFailure)
    assert result.field_errors == {'comment': ['Comment is required']}
    assert result.original_values == {}


def test_comment_schema_rejects_whitespace_only():
    """Test that a blank comment is rejected."""
    result = validate(COMMENT_SCHEMA, {'comment': '   '})

    assert result.field_errors == {'comment': ['Comment is required']}


def test_comment_schema_accepts_text():
    result = validate(COMMENT_SCHEMA, {'comment': 'hello'})

    assert result == ValidationSuccess(data={'comment': 'hello'})


def test_max_length_constraint_message():
    assert MaxLength('Title', 3).check('abcd') == 'Title must not exceed 3 characters'
    assert MaxLength('Title', 3).check('abc') is None


def test_validate_does_not_mutate_input(valid_feedback):
    """Test that validation is a pure function of its inputs."""
    raw = dict(valid_feedback)
    raw['name'] = 'A'
    snapshot = dict(raw)

    validate(FEEDBACK_SCHEMA, raw)

    assert raw == snapshot
