"""
Variable substitution inside attribute and element values.

A value is literal text in which ``$(name)`` is replaced by the value of the
variable ``name`` and ``$$`` stands for a single ``$``. Any other use of
``$`` is malformed.
"""

import re

from recordtree.core.types import VariableLookup
from recordtree.exceptions import InvalidValueError

VARIABLE_MARKER = "$"

VARIABLE_NAME_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_.\-]*$")


def resolve_value(raw: str, lookup: VariableLookup) -> str:
    """
    Substitute variable references in a raw value.

    Params:
        raw: Raw attribute or element text
        lookup: Returns a variable's value by name, or None when not found

    Returns:
        The value with every reference replaced

    Raises:
        InvalidValueError: On a malformed reference or an unknown variable
    """
    if VARIABLE_MARKER not in raw:
        return raw

    parts = []
    length = len(raw)
    i = 0

    while i < length:
        ch = raw[i]
        if ch != VARIABLE_MARKER:
            parts.append(ch)
            i += 1
            continue

        if i + 1 >= length:
            raise InvalidValueError(raw, "'$' must be followed by '(' or '$'", i)

        following = raw[i + 1]
        if following == VARIABLE_MARKER:
            parts.append(VARIABLE_MARKER)
            i += 2
            continue

        if following != "(":
            raise InvalidValueError(raw, "'$' must be followed by '(' or '$'", i)

        end = raw.find(")", i + 2)
        if end == -1:
            raise InvalidValueError(raw, "variable reference is not closed with ')'", i)

        name = raw[i + 2 : end]
        if not name:
            raise InvalidValueError(raw, "variable name is empty", i)
        if not VARIABLE_NAME_PATTERN.match(name):
            raise InvalidValueError(raw, f"'{name}' is not a valid variable name", i)

        value = lookup(name)
        if value is None:
            raise InvalidValueError(raw, f"variable '{name}' is not defined", i)

        parts.append(value)
        i = end + 1

    return "".join(parts)

