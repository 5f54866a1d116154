"""PhoneNumber value object for validated contact numbers."""

import re

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import String

from ordering.domain import ordering


@ordering.value_object
class PhoneNumber:
    """Value object for phone numbers.

    Accepts digits, spaces, hyphens, parentheses, and an optional leading +.
    """

    number: String(required=True, max_length=20)

    @invariant.post
    def validate_phone_format(self):
        number = self.number

        if not re.search(r"\d", number):
            raise ValidationError({"phone": [f"Invalid phone number: {number!r}"]})

        if not re.match(r"^\+?[\d\s\-()]+$", number):
            raise ValidationError({"phone": [f"Invalid phone number: {number!r}"]})

    @property
    def digits(self) -> str:
        return re.sub(r"\D", "", self.number)
