"""
Failure categories intercepted by the error normalizer.

A closed set of categories and one table mapping each category to
its (status, label, message) triple. Anything that does not classify
into a category is left to the server's default handling.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from fastapi.exceptions import RequestValidationError

from app.domain.items.errors import MissingValueError

HTTP_400 = 400
HTTP_500 = 500

VALIDATION_MESSAGE = "Validation failed for one or more arguments."
NULL_REFERENCE_MESSAGE = "A null pointer exception occurred."


class FailureCategory(Enum):
    """The kinds of failure the error normalizer renders."""

    VALIDATION = "validation"
    UNCHECKED = "unchecked"
    NULL_REFERENCE = "null_reference"
    INVALID_ARGUMENT = "invalid_argument"


@dataclass(frozen=True)
class FailureSpec:
    """How one failure category is rendered.

    Attributes:
        status: HTTP status code of the response.
        label: Short category string for the ``error`` field.
        fixed_message: Message used verbatim, or None to use the
            failure's own text.
    """

    status: int
    label: str
    fixed_message: Optional[str] = None

    def message_for(self, exc: BaseException) -> str:
        if self.fixed_message is not None:
            return self.fixed_message
        return str(exc)


FAILURE_TABLE: dict[FailureCategory, FailureSpec] = {
    FailureCategory.VALIDATION: FailureSpec(
        HTTP_400, "Validation Error", VALIDATION_MESSAGE
    ),
    FailureCategory.UNCHECKED: FailureSpec(HTTP_400, "Bad Request"),
    FailureCategory.NULL_REFERENCE: FailureSpec(
        HTTP_500, "Internal Server Error", NULL_REFERENCE_MESSAGE
    ),
    FailureCategory.INVALID_ARGUMENT: FailureSpec(HTTP_400, "Bad Request"),
}

# Most specific first: MissingValueError is also a RuntimeError, and
# InvalidItemArgumentError is both a ValueError and a RuntimeError.
# AttributeError and TypeError are what dereferencing None raises.
_CLASSIFICATION: tuple[tuple[type[BaseException], FailureCategory], ...] = (
    (RequestValidationError, FailureCategory.VALIDATION),
    (MissingValueError, FailureCategory.NULL_REFERENCE),
    (AttributeError, FailureCategory.NULL_REFERENCE),
    (TypeError, FailureCategory.NULL_REFERENCE),
    (ValueError, FailureCategory.INVALID_ARGUMENT),
    (LookupError, FailureCategory.UNCHECKED),
    (ArithmeticError, FailureCategory.UNCHECKED),
    (AssertionError, FailureCategory.UNCHECKED),
    (RuntimeError, FailureCategory.UNCHECKED),
)

INTERCEPTED_TYPES: tuple[type[BaseException], ...] = tuple(
    exc_type for exc_type, _ in _CLASSIFICATION
)


def classify(exc: BaseException) -> Optional[FailureCategory]:
    """Return the category of exc, or None if it is not intercepted."""
    for exc_type, category in _CLASSIFICATION:
        if isinstance(exc, exc_type):
            return category
    return None


def describe(category: FailureCategory) -> FailureSpec:
    """Return the rendering spec for a category."""
    return FAILURE_TABLE[category]
