import operator
import re
from typing import Optional, Tuple


ALLOWED_OPERATORS = {
    ">=": operator.ge,
    ">": operator.gt,
    "<": operator.lt,
    "<=": operator.le,
    "==": operator.eq,
    "!=": operator.ne,
}

_LEADING_DIGITS = re.compile(r"\d+")


def parse_version(version: str) -> Tuple[int, ...]:
    """
    Split a dotted version into numeric segments.

    Non-numeric segments count as 0; "120.0b1" → (120, 0).
    """
    segments = []
    for part in (version or "").strip().split("."):
        digits = _LEADING_DIGITS.match(part)
        segments.append(int(digits.group()) if digits else 0)
    return tuple(segments)


def compare_versions(left: str, right: str, op: str) -> Optional[bool]:
    """
    Compare two dotted versions segment by segment.

    The shorter side is padded with zeros ("14" == "14.0.0").

    Returns:
        Result of the comparison, or None for an unsupported operator
    """
    compare = ALLOWED_OPERATORS.get(op)
    if not compare:
        return None

    a = parse_version(left)
    b = parse_version(right)
    width = max(len(a), len(b))
    a = a + (0,) * (width - len(a))
    b = b + (0,) * (width - len(b))

    return compare(a, b)
