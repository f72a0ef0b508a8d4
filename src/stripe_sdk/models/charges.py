from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict

from ._base import StripeObject


class ChargeOutcome(BaseModel):
    model_config = ConfigDict(extra="allow")

    network_status: Optional[str] = None
    reason: Optional[str] = None
    risk_level: Optional[str] = None
    rule: Optional[Any] = None
    seller_message: Optional[str] = None
    type: Optional[str] = None


class Charge(StripeObject):
    amount: Optional[int] = None
    amount_refunded: Optional[int] = None
    application: Optional[Any] = None
    application_fee: Optional[Any] = None
    balance_transaction: Optional[Any] = None
    captured: Optional[bool] = None
    created: Optional[int] = None
    currency: Optional[str] = None
    customer: Optional[Any] = None
    description: Optional[str] = None
    destination: Optional[Any] = None
    dispute: Optional[Any] = None
    failure_code: Optional[str] = None
    failure_message: Optional[str] = None
    fraud_details: Optional[Dict[str, Any]] = None
    invoice: Optional[Any] = None
    on_behalf_of: Optional[Any] = None
    order: Optional[Any] = None
    outcome: Optional[ChargeOutcome] = None
    paid: Optional[bool] = None
    receipt_email: Optional[str] = None
    receipt_number: Optional[str] = None
    refunded: Optional[bool] = None
    refunds: Optional[Any] = None
    review: Optional[Any] = None
    shipping: Optional[Dict[str, Any]] = None
    source: Optional[Any] = None
    source_transfer: Optional[Any] = None
    statement_descriptor: Optional[str] = None
    status: Optional[str] = None
    transfer: Optional[Any] = None
    transfer_group: Optional[str] = None
