import pytest

from errors import InvalidFieldValue, InvalidQuantity, MissingRequiredField
from submission import build_submission, parse_quantity


def test_build_submission(form, fixed_now):
    sub = build_submission(form, now=fixed_now)
    assert sub.first_name == "Ada"
    assert sub.gpu_type == "H100"
    assert sub.quantity == 4
    assert sub.message == "ASAP please"
    assert sub.submitted_at == fixed_now


def test_message_is_optional(form):
    del form["message"]
    sub = build_submission(form)
    assert sub.message == ""
    assert sub.submitted_at.tzinfo is not None


@pytest.mark.parametrize("blank", [None, "", "   "])
def test_blank_required_field(form, blank):
    form["email"] = blank
    with pytest.raises(MissingRequiredField):
        build_submission(form)


@pytest.mark.parametrize("value, expected", [(3, 3), ("12", 12), (" 2 ", 2)])
def test_parse_quantity(value, expected):
    assert parse_quantity(value) == expected


@pytest.mark.parametrize("value", ["0", 0, -1, "-1", "1.5", 2.0, "3 GPUs", "abc", True, [], "9" * 5000])
def test_parse_quantity_rejects(value):
    with pytest.raises(InvalidQuantity):
        parse_quantity(value)


@pytest.mark.parametrize("field, value", [
    ("firstName", {"a": 1}),
    ("gpuType", ["H100"]),
    ("email", True),
    ("message", {"text": "hi"}),
])
def test_structured_text_fields_rejected(form, field, value):
    form[field] = value
    with pytest.raises(InvalidFieldValue):
        build_submission(form)


def test_numeric_text_field_is_kept_as_text(form):
    form["lastName"] = 7
    assert build_submission(form).last_name == "7"
