from typing import Optional

from ._base import StripeObject


class Coupon(StripeObject):
    amount_off: Optional[int] = None
    created: Optional[int] = None
    currency: Optional[str] = None
    duration: Optional[str] = None
    duration_in_months: Optional[int] = None
    max_redemptions: Optional[int] = None
    percent_off: Optional[float] = None
    redeem_by: Optional[int] = None
    times_redeemed: Optional[int] = None
    valid: Optional[bool] = None
    deleted: Optional[bool] = None
