"""
Coupon code generation.

Format: ``#<offerId>-<last 4 digits of the epoch time in milliseconds>``,
e.g. ``#42-0917``. Two redemptions of the same offer whose timestamps end
in the same four millisecond digits produce the same code; the
redemptions table has a unique index on coupon_code and the service
retries with a fresh timestamp when that happens.
"""

import re
from datetime import datetime, timedelta, timezone
from typing import Optional

COUPON_PATTERN = re.compile(r"^#(\d+)-(\d{4})$")

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def generate_coupon_code(offer_id: int, now: Optional[datetime] = None) -> str:
    """Build the coupon code for a redemption of ``offer_id`` at ``now``."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    millis = (now - _EPOCH) // timedelta(milliseconds=1)
    return f"#{offer_id}-{millis % 10000:04d}"


def is_coupon_code(value: str) -> bool:
    """Check whether a string has the coupon code shape."""
    return COUPON_PATTERN.match(value) is not None
