from dataclasses import dataclass
from datetime import datetime, timezone

from errors import InvalidFieldValue, InvalidQuantity, MissingRequiredField

REQUIRED_FIELDS = ("firstName", "lastName", "email", "gpuType", "quantity")


@dataclass(frozen=True)
class Submission:
    first_name: str
    last_name: str
    email: str
    gpu_type: str
    quantity: int
    message: str
    submitted_at: datetime


def _is_blank(value):
    return value is None or (isinstance(value, str) and not value.strip())


def parse_quantity(value):
    # bool is an int subclass; "true" is not a GPU count
    if isinstance(value, bool):
        raise InvalidQuantity()
    if isinstance(value, int):
        quantity = value
    elif isinstance(value, str) and value.strip().isdecimal():
        try:
            quantity = int(value.strip())
        except ValueError:
            # past the interpreter's int digit limit
            raise InvalidQuantity() from None
    else:
        raise InvalidQuantity()
    if quantity < 1:
        raise InvalidQuantity()
    return quantity


def _text(data, field):
    value = data.get(field)
    if value is None:
        return ""
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise InvalidFieldValue()
    return str(value)


def build_submission(data, now=None):
    """Validate a parsed request body and capture it as a Submission.

    Raises MissingRequiredField when any required field is absent or blank,
    InvalidFieldValue when a text field holds a list, object or boolean,
    and InvalidQuantity when quantity is not a positive whole number.
    """
    if any(_is_blank(data.get(field)) for field in REQUIRED_FIELDS):
        raise MissingRequiredField()

    return Submission(
        first_name=_text(data, "firstName"),
        last_name=_text(data, "lastName"),
        email=_text(data, "email"),
        gpu_type=_text(data, "gpuType"),
        quantity=parse_quantity(data["quantity"]),
        message=_text(data, "message"),
        submitted_at=now or datetime.now(timezone.utc),
    )
