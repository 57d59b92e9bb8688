"""
Extract Layer Schemas

Record schemas for data coming from the Awin publisher API.
Field names follow the API's camelCase wire format.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
)

from ..exceptions import AwinParseError


def _as_group_id(v):
    """Commission group ids arrive as int or str; compare them as str"""
    if v is None:
        return None
    if isinstance(v, bool) or not isinstance(v, (int, str)):
        raise ValueError("Commission group id must be a string or integer")
    return str(v)


class Amount(BaseModel):
    """Monetary amount with currency"""

    model_config = ConfigDict(extra="ignore")

    amount: Optional[float] = Field(None, description="Amount value")
    currency: Optional[str] = Field(None, description="ISO 4217 currency code")


class ClickRefs(BaseModel):
    """Click references passed through the tracking link"""

    model_config = ConfigDict(extra="ignore")

    clickRef: Optional[str] = None
    clickRef2: Optional[str] = None
    clickRef3: Optional[str] = None
    clickRef4: Optional[str] = None
    clickRef5: Optional[str] = None
    clickRef6: Optional[str] = None


# =============================================================================
# Commission Group Schemas
# =============================================================================


class CommissionGroup(BaseModel):
    """Commission tier of one advertiser"""

    model_config = ConfigDict(extra="ignore")

    groupId: str = Field(..., description="Commission group identifier")
    advertiserId: Optional[int] = Field(
        None, description="Advertiser the group belongs to (from the response envelope)"
    )
    groupCode: Optional[str] = Field(None, description="Short group code")
    groupName: Optional[str] = Field(None, description="Human readable group name")
    type: Optional[str] = Field(None, description="'fix' or 'percentage'")
    percentage: Optional[float] = Field(None, description="Commission percentage")
    amount: Optional[float] = Field(None, description="Fixed commission amount")
    currency: Optional[str] = Field(None, description="Currency of a fixed amount")

    @field_validator("groupId", mode="before")
    @classmethod
    def validate_group_id(cls, v):
        if v is None or v == "":
            raise ValueError("groupId is required")
        return _as_group_id(v)

    @property
    def id(self) -> str:
        return self.groupId


class CommissionGroupsResponse(BaseModel):
    """Schema for the commissiongroups endpoint response"""

    model_config = ConfigDict(extra="ignore")

    advertiser: int = Field(..., description="Advertiser identifier")
    publisher: Optional[int] = Field(None, description="Publisher identifier")
    commissionGroups: List[CommissionGroup] = Field(default_factory=list)

    def groups(self) -> List[CommissionGroup]:
        """Commission groups annotated with the envelope's advertiser id"""
        for group in self.commissionGroups:
            group.advertiserId = self.advertiser
        return list(self.commissionGroups)


# =============================================================================
# Transaction Schemas
# =============================================================================


class TransactionPart(BaseModel):
    """One commission-bearing slice of a transaction"""

    model_config = ConfigDict(extra="ignore")

    commissionGroupId: Optional[str] = Field(None, description="Commission group id")
    amount: Optional[float] = Field(None, description="Sale amount of this part")
    commissionAmount: Optional[float] = Field(None, description="Commission of this part")
    commissionGroupCode: Optional[str] = None
    commissionGroupName: Optional[str] = None
    commissionGroup: Optional[CommissionGroup] = Field(
        None, description="Resolved commission group (verbose mode only)"
    )

    @field_validator("commissionGroupId", mode="before")
    @classmethod
    def validate_commission_group_id(cls, v):
        return _as_group_id(v)


class Transaction(BaseModel):
    """One reported affiliate transaction, possibly split into parts"""

    model_config = ConfigDict(extra="ignore")

    id: Optional[int] = Field(None, description="Transaction identifier")
    advertiserId: int = Field(..., description="Advertiser identifier")
    url: Optional[str] = None
    publisherId: Optional[int] = None
    commissionSharingPublisherId: Optional[int] = None
    siteName: Optional[str] = None
    commissionStatus: Optional[str] = Field(
        None, description="pending, approved, declined or deleted"
    )
    commissionAmount: Optional[Amount] = None
    saleAmount: Optional[Amount] = None
    ipHash: Optional[str] = None
    customerCountry: Optional[str] = None
    clickRefs: Optional[ClickRefs] = None
    clickDate: Optional[datetime] = None
    transactionDate: Optional[datetime] = None
    validationDate: Optional[datetime] = None
    type: Optional[str] = None
    declineReason: Optional[str] = None
    voucherCodeUsed: Optional[bool] = None
    voucherCode: Optional[str] = None
    lapseTime: Optional[int] = None
    amended: Optional[bool] = None
    amendReason: Optional[str] = None
    oldSaleAmount: Optional[Amount] = None
    oldCommissionAmount: Optional[Amount] = None
    clickDevice: Optional[str] = None
    transactionDevice: Optional[str] = None
    publisherUrl: Optional[str] = None
    advertiserCountry: Optional[str] = None
    orderRef: Optional[str] = None
    customParameters: Optional[List[Dict[str, Any]]] = None
    paidToPublisher: Optional[bool] = None
    paymentId: Optional[int] = None
    transactionQueryId: Optional[int] = None
    originalSaleAmount: Optional[float] = None
    transactionParts: List[TransactionPart] = Field(default_factory=list)

    @field_validator("transactionParts", mode="before")
    @classmethod
    def validate_transaction_parts(cls, v):
        """A null parts list is treated as no parts"""
        if v is None:
            return []
        return v


_TRANSACTIONS_ADAPTER = TypeAdapter(List[Transaction])


def parse_transactions(body: Any) -> List[Transaction]:
    """Parse the transactions endpoint body; an empty body gives no transactions"""
    if body is None:
        return []
    try:
        return _TRANSACTIONS_ADAPTER.validate_python(body)
    except ValidationError as e:
        raise AwinParseError(f"Invalid transactions response: {e}") from e


def parse_commission_groups(body: Any) -> List[CommissionGroup]:
    """Parse the commissiongroups endpoint body; an empty body gives no groups"""
    if body is None:
        return []
    try:
        response = CommissionGroupsResponse.model_validate(body)
    except ValidationError as e:
        raise AwinParseError(f"Invalid commission groups response: {e}") from e
    return response.groups()
