from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class StripeObject(BaseModel):
    """Base for every typed API object.

    Any object carrying a string ``id`` can be passed wherever the API expects
    an ID; the request core reduces it to that ID before sending.
    """

    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        use_enum_values=True,
        arbitrary_types_allowed=True,
        extra="allow",
    )
    id: Optional[str] = None
    object: Optional[str] = None
    livemode: Optional[bool] = None
    metadata: Optional[Dict[str, Any]] = None
