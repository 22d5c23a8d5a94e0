"""
Validation and sanitization of product form fields.

Every field is checked independently and pydantic collects all failures in
one pass, so callers always get the complete error list. Text is trimmed and
markup-significant characters are escaped; numeric text becomes int/float.
"""

# Standard library imports
import html
import re
from typing import Any, List, Mapping, Tuple, Union, Optional

# External package imports
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError

# Local application imports
from ...core.exceptions import FieldError


# Same shape as validator.js isNumeric: optional sign, optional fraction
_NUMERIC_PATTERN = re.compile(r"^[+-]?([0-9]*[.])?[0-9]+$")

# Characters html.escape leaves alone but the storefront templates escape too
_EXTRA_ESCAPES = str.maketrans({"/": "&#x2F;", "\\": "&#x5C;", "`": "&#96;"})

# Largest integer BSON stores as int64; wider values are kept as doubles
_INT64_MAX = 2 ** 63 - 1

_EMPTY_NUMBER = "empty_number"
# An empty number fails the length rule and the numeric rule
_FOLLOW_UP_MESSAGES = {_EMPTY_NUMBER: ("Must be Numeric",)}


def _trimmed(value: Any) -> str:
    return "" if value is None else str(value).strip()


def _escaped(text: str) -> str:
    return html.escape(text, quote=True).translate(_EXTRA_ESCAPES)


def _checked_text(value: Any, min_length: int, message: str) -> str:
    text = _trimmed(value)
    if len(text) < min_length:
        raise PydanticCustomError("min_length", message)
    return _escaped(text)


def _checked_number(value: Any) -> Union[int, float]:
    text = _trimmed(value)
    if len(text) < 1:
        raise PydanticCustomError(_EMPTY_NUMBER, "Must be at least 1 number")
    if not _NUMERIC_PATTERN.match(text):
        raise PydanticCustomError("numeric", "Must be Numeric")
    if "." in text:
        return float(text)
    number = int(text)
    if abs(number) > _INT64_MAX:
        return float(number)
    return number


class SanitizedProductFields(BaseModel):
    """Cleaned product fields. Constructing it runs every rule."""
    model_config = ConfigDict(populate_by_name=True, validate_default=True)

    name: str = ""
    description: str = ""
    category: str = ""
    price: Union[int, float] = Field(default="")
    number_in_stock: Union[int, float] = Field(default="", alias="numberInStock")

    @field_validator("name", mode="before")
    @classmethod
    def _check_name(cls, value: Any) -> str:
        return _checked_text(value, 2, "Must be at least 2 letters")

    @field_validator("description", mode="before")
    @classmethod
    def _check_description(cls, value: Any) -> str:
        return _checked_text(value, 10, "Must be at least 10 letters")

    @field_validator("category", mode="before")
    @classmethod
    def _check_category(cls, value: Any) -> str:
        return _checked_text(value, 1, "This field is required")

    @field_validator("price", "number_in_stock", mode="before")
    @classmethod
    def _check_number(cls, value: Any) -> Union[int, float]:
        return _checked_number(value)


class ProductValidator:
    """Runs the product field rules over raw form input"""

    def collect(self, raw: Mapping[str, Any]) -> Tuple[Optional[SanitizedProductFields], List[FieldError]]:
        """
        Validate and sanitize raw fields without raising
        
        Args:
            raw: Form fields keyed by wire name (name, description, category,
                price, numberInStock)
            
        Returns:
            (sanitized fields, []) on success, (None, errors) otherwise.
            Errors are ordered by field. An empty number reports both the
            length and the numeric message.
        """
        try:
            return SanitizedProductFields.model_validate(dict(raw)), []
        except ValidationError as exception:
            errors = []
            for error in exception.errors():
                field = str(error["loc"][0])
                errors.append(FieldError(field=field, message=error["msg"]))
                for message in _FOLLOW_UP_MESSAGES.get(error["type"], ()):
                    errors.append(FieldError(field=field, message=message))
            return None, errors
