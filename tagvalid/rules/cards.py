"""Payment card rules — ``cc``.

``cc`` checks the number against the issuer prefix/length table. ``cc:luhn``
additionally requires the mod-10 checksum; plenty of test and sandbox numbers
in circulation carry a brand prefix but no valid check digit, so the checksum
is opt-in.
"""

import re
from typing import Any

from tagvalid.rules.base import BaseRule

CARD_RE = re.compile(
    r"4[0-9]{12}(?:[0-9]{3})?"                        # Visa
    r"|5[1-5][0-9]{14}"                               # Mastercard
    r"|(?:222[1-9]|22[3-9][0-9]|2[3-6][0-9]{2}|27[01][0-9]|2720)[0-9]{12}"  # Mastercard 2-series
    r"|3[47][0-9]{13}"                                # American Express
    r"|3(?:0[0-5]|[68][0-9])[0-9]{11}"                # Diners Club
    r"|6(?:011|5[0-9]{2})[0-9]{12}"                   # Discover
    r"|(?:2131|1800|35[0-9]{3})[0-9]{11}"             # JCB
    r"|6[27][0-9]{14}"                                # UnionPay
)

SEPARATORS_RE = re.compile(r"[ -]")


def luhn_valid(digits: str) -> bool:
    """Standard mod-10 checksum over a string of digits."""
    total = 0
    for i, ch in enumerate(reversed(digits)):
        d = int(ch)
        if i % 2 == 1:
            d *= 2
            if d > 9:
                d -= 9
        total += d
    return total % 10 == 0


class CreditCardRule(BaseRule):
    """Card number with a known issuer prefix and length; spaces and dashes are ignored."""

    @property
    def name(self) -> str:
        return "cc"

    def check(self, value: Any, param: str = "") -> bool:
        if isinstance(value, bool) or not isinstance(value, (str, int)):
            return False
        digits = SEPARATORS_RE.sub("", str(value))
        if CARD_RE.fullmatch(digits) is None:
            return False
        if param.strip() == "luhn":
            return luhn_valid(digits)
        return True
