import pytest

from app.core.errors import ValidationError
from app.features.validation import (
    CATEGORY_REQUIRED,
    TASK_REQUIRED,
    ensure_valid,
    validate_required,
)


def test_no_errors_when_required_fields_present():
    assert validate_required({"name": "Work"}, CATEGORY_REQUIRED) == {}
    assert validate_required({"title": "Write report", "description": None}, TASK_REQUIRED) == {}


@pytest.mark.parametrize("value", ["", "   ", "\t\n", None])
def test_blank_required_field_is_reported(value):
    assert validate_required({"title": value}, TASK_REQUIRED) == {"title": "Title is required"}


def test_missing_field_is_reported_on_create_but_not_on_partial_update():
    assert validate_required({}, CATEGORY_REQUIRED) == {"name": "Name is required"}
    assert validate_required({}, CATEGORY_REQUIRED, partial=True) == {}
    assert validate_required({"name": " "}, CATEGORY_REQUIRED, partial=True) == {"name": "Name is required"}


def test_ensure_valid_raises_structured_error():
    with pytest.raises(ValidationError) as exc_info:
        ensure_valid({"name": ""}, CATEGORY_REQUIRED)

    err = exc_info.value
    assert err.kind == "validation"
    assert err.errors == {"name": "Name is required"}
    assert err.to_dict() == {
        "kind": "validation",
        "message": "Name is required",
        "errors": {"name": "Name is required"},
    }
