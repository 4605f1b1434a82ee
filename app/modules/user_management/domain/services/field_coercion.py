# 📄 File: app/modules/user_management/domain/services/field_coercion.py
# 🧭 Purpose (Layman Explanation):
# Turns whatever a client sent (text from a form, numbers or strings from JSON) into clean values
# we can save - counters that can't be read as numbers simply become zero instead of failing
# 🧪 Purpose (Technical Summary):
# Pure coercion functions and a policy-table driven FieldCoercion producing full-replace and
# partial-merge payloads keyed by model attribute names; also parses record identifiers
# 🔗 Dependencies:
# app.modules.user_management.domain.models.user (field catalogues), app.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# user_service.py (create, update, bulk operations), bulk update pipeline

import math
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from app.shared.core.exceptions import InvalidIdentifierError, ValidationError

from ..models.user import NUMERIC_FIELDS, TEXT_FIELDS, attribute_name

_INTEGER_LITERAL = re.compile(r"^[+-]?\d+$")

# Counter columns are INTEGER, which is 32-bit on PostgreSQL
INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1


def _parse_int(value: Any) -> Optional[int]:
    """Best-effort integer parse; None when the value is unusable."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return None
        # "3.9" counts as 3
        return int(number) if math.isfinite(number) else None
    return None


def _parse_float(value: Any) -> Optional[float]:
    """Best-effort float parse; None when the value is unusable or not finite."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def to_optional_int(value: Any, default: int = 0) -> int:
    """Parse ``value`` as an integer, falling back to ``default``."""
    parsed = _parse_int(value)
    return default if parsed is None else parsed


def to_optional_float(value: Any, default: float = 0.0) -> float:
    """Parse ``value`` as a float, falling back to ``default``."""
    parsed = _parse_float(value)
    return default if parsed is None else parsed


@dataclass(frozen=True)
class NumericPolicy:
    """
    How one numeric field is parsed and what it becomes when parsing fails.

    Values outside ``minimum``/``maximum`` are treated like unparsable input.
    """
    parser: Callable[[Any, Any], Any]
    default: Any
    minimum: Optional[float] = None
    maximum: Optional[float] = None

    def apply(self, value: Any) -> Any:
        parsed = self.parser(value, self.default)
        if self.minimum is not None and parsed < self.minimum:
            return self.default
        if self.maximum is not None and parsed > self.maximum:
            return self.default
        return parsed


# Absent, unparsable or out-of-range numeric input never fails a request; it
# becomes the default listed here.
NUMERIC_COERCION_POLICY: Dict[str, NumericPolicy] = {
    "likes": NumericPolicy(to_optional_int, 0, INT32_MIN, INT32_MAX),
    "reviews": NumericPolicy(to_optional_int, 0, INT32_MIN, INT32_MAX),
    "stars": NumericPolicy(to_optional_float, 0.0),
}


def coerce_text(field: str, value: Any, index: Optional[int] = None) -> Optional[str]:
    """
    Pass a text field through, rejecting values that are not strings.

    Raises:
        ValidationError: ``value`` is neither None nor a str
    """
    if value is None or isinstance(value, str):
        return value

    details: Dict[str, Any] = {"received_type": type(value).__name__}
    if index is not None:
        details["index"] = index
    raise ValidationError(
        message=f"Field '{field}' must be a string",
        field=field,
        details=details,
    )


def parse_identifier(value: Any, field: str = "id", index: Optional[int] = None) -> int:
    """
    Parse a record identifier.

    Accepts ints (not bools) and strings holding an optionally signed run of
    digits. Anything else raises InvalidIdentifierError.
    """
    if isinstance(value, bool):
        raise InvalidIdentifierError(value, field=field, index=index)
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INTEGER_LITERAL.match(value.strip()):
        return int(value.strip())
    raise InvalidIdentifierError(value, field=field, index=index)


class FieldCoercion:
    """
    Normalizes raw field maps into persistence payloads.

    Text fields pass through unchanged but must be strings or null. Numeric
    fields go through the policy table. Unknown keys, including ``id``, are
    dropped. ``index`` names the batch entry in raised errors.
    """

    def __init__(
        self,
        policy: Optional[Mapping[str, NumericPolicy]] = None,
        text_fields: Tuple[str, ...] = TEXT_FIELDS,
    ):
        self.policy = dict(NUMERIC_COERCION_POLICY if policy is None else policy)
        self.text_fields = tuple(text_fields)

    @property
    def known_fields(self) -> Tuple[str, ...]:
        return self.text_fields + tuple(self.policy)

    def coerce_value(self, field: str, value: Any, index: Optional[int] = None) -> Any:
        if field in self.policy:
            return self.policy[field].apply(value)
        return coerce_text(field, value, index)

    def coerce_full(
        self,
        fields: Optional[Mapping[str, Any]],
        index: Optional[int] = None,
    ) -> Dict[str, Any]:
        """
        Every record slot, defaulted: absent text is None, absent numerics
        take their policy default. Used for create and full-replace update.
        """
        fields = fields or {}
        payload: Dict[str, Any] = {}
        for name in self.text_fields:
            payload[attribute_name(name)] = coerce_text(name, fields.get(name), index)
        for name, rule in self.policy.items():
            payload[attribute_name(name)] = rule.apply(fields.get(name))
        return payload

    def coerce_partial(
        self,
        fields: Optional[Mapping[str, Any]],
        index: Optional[int] = None,
    ) -> Dict[str, Any]:
        """Only the known keys actually present in ``fields``, coerced."""
        fields = fields or {}
        return {
            attribute_name(name): self.coerce_value(name, fields[name], index)
            for name in self.known_fields
            if name in fields
        }

    def has_updatable_field(self, fields: Optional[Mapping[str, Any]]) -> bool:
        """True when at least one known field is present in ``fields``."""
        return any(name in (fields or {}) for name in self.known_fields)


__all__ = [
    "FieldCoercion",
    "INT32_MAX",
    "INT32_MIN",
    "NumericPolicy",
    "NUMERIC_COERCION_POLICY",
    "NUMERIC_FIELDS",
    "coerce_text",
    "parse_identifier",
    "to_optional_float",
    "to_optional_int",
]
