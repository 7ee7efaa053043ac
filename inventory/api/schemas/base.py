"""
Shared form validation and sanitization helpers.

Every inventory form trims its text input, checks each field against its
rule, and HTML-escapes the accepted text. Rules are checked on the trimmed
value; escaping happens afterwards so that it does not count toward
length limits. When validation fails, ``sanitize`` produces the same
trimmed/escaped values so a form can be redisplayed without losing input.

Reference: https://docs.pydantic.dev/latest/concepts/validators/
"""
import html
import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Callable, ClassVar, Mapping, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator
from pydantic_core import PydanticCustomError

_INTEGER = re.compile(r"[+-]?\d+")
_CENTS = Decimal("0.01")


class FieldError(BaseModel):
    """One failed field rule."""

    field: str
    message: str


def escape(value: str) -> str:
    return html.escape(value, quote=True)


def text(value: Any) -> str:
    """Trim a submitted text value; missing input becomes an empty string."""
    if value is None:
        return ""
    return str(value).strip()


def optional_text(value: Any) -> Optional[str]:
    value = text(value)
    return value or None


def to_int(value: Any) -> Optional[int]:
    """Parse an integer from form input, or None if it is not one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INTEGER.fullmatch(value.strip()):
        try:
            return int(value.strip())
        except ValueError:
            # More digits than int() will convert from a string
            return None
    return None


def to_decimal(value: Any) -> Optional[Decimal]:
    """
    Parse a finite decimal from form input, rounded to cents.

    Returns None for input that is not a number, and for numbers too large
    to hold at cent precision.
    """
    if isinstance(value, bool) or value is None:
        return None
    try:
        number = Decimal(str(value).strip())
        if not number.is_finite():
            return None
        return number.quantize(_CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return None


def rule_error(field: str, message: str) -> PydanticCustomError:
    return PydanticCustomError(f"{field}_rule", message)


class InventoryForm(BaseModel):
    """
    Base class for the four entity forms.

    Subclasses declare their fields with defaults and a ``mode="before"``
    validator per rule; defaults are validated too, so a missing field
    reports the rule's own message instead of "Field required".
    """

    model_config = ConfigDict(validate_default=True, str_strip_whitespace=True)

    # Text fields HTML-escaped once they pass validation
    escaped_fields: ClassVar[tuple[str, ...]] = ()
    # Parsers applied when redisplaying rejected input
    converters: ClassVar[dict[str, Callable[[Any], Any]]] = {}

    @model_validator(mode="after")
    def escape_text(self) -> "InventoryForm":
        for name in self.escaped_fields:
            value = getattr(self, name)
            if isinstance(value, str):
                setattr(self, name, escape(value))
        return self

    @classmethod
    def sanitize(cls, data: Mapping[str, Any]) -> dict[str, Any]:
        """Trim, parse and escape submitted values without validating them."""
        values = {}
        for name in cls.model_fields:
            value = data.get(name)
            if isinstance(value, str):
                value = value.strip()
            if name in cls.converters:
                parsed = cls.converters[name](value)
                if parsed is not None:
                    value = parsed
            if name in cls.escaped_fields and isinstance(value, str):
                value = escape(value)
            values[name] = value
        return values

    @classmethod
    def check(
        cls, data: Mapping[str, Any], context: Optional[dict[str, Any]] = None
    ) -> tuple[dict[str, Any], list[FieldError]]:
        """
        Validate a submission.

        Returns:
            (values, errors): sanitized values and the ordered list of
            failed rules; errors is empty when the submission is accepted.
        """
        try:
            form = cls.model_validate(dict(data), context=context)
        except ValidationError as e:
            errors = [
                FieldError(field=str(error["loc"][0]) if error["loc"] else "", message=error["msg"])
                for error in e.errors()
            ]
            return cls.sanitize(data), errors
        return form.model_dump(), []
