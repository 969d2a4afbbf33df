from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Any

_money_noise_re = re.compile(r"[$,\s]")


def parse_number(value: Any) -> Decimal:
    """Lenient numeric parse for CMS values ("$1,250,000", "12.5", 7). Unparseable -> 0."""

    if isinstance(value, bool):
        return Decimal(0)
    if isinstance(value, (int, Decimal)):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, str):
        v = _money_noise_re.sub("", value)
        if not v:
            return Decimal(0)
        try:
            parsed = Decimal(v)
        except InvalidOperation:
            return Decimal(0)
        return parsed if parsed.is_finite() else Decimal(0)
    return Decimal(0)
