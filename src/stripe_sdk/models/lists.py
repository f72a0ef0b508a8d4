from typing import Any, List, Optional

from ._base import StripeObject


class StripeList(StripeObject):
    """A page of objects returned by a list endpoint."""

    data: List[Any] = []
    has_more: bool = False
    url: Optional[str] = None
    total_count: Optional[int] = None
