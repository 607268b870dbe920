# schemas.py
"""
Pydantic models for the OMS client.

Defines the extension selector and the response structures returned by
the three OMS operations.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Extension(str, Enum):
    """Product group namespace targeted by a request."""

    LIGHT = "lp"
    PHARMA = "pharma"
    TOBACCO = "tobacco"
    SHOES = "shoes"
    TIRES = "tires"
    PERFUM = "perfum"
    PHOTO = "photo"
    MILK = "milk"
    WATER = "water"
    BICYCLE = "bicycle"
    WHEELCHAIRS = "wheelchairs"

    def __str__(self) -> str:
        return self.value


class OmsResponse(BaseModel):
    """Base for OMS response bodies. Immutable, ignores unknown fields."""

    model_config = ConfigDict(frozen=True, extra="ignore")


class PoolInfo(OmsResponse):
    """State of a single code pool behind a buffer."""

    status: str = Field(description="Pool status")
    quantity: Optional[int] = Field(default=None, description="Codes requested")
    leftInRegistrar: Optional[int] = Field(
        default=None, description="Codes not yet passed to the buffer"
    )
    registrarId: Optional[str] = None
    isRegistrarReady: Optional[bool] = None
    registrarErrorCount: Optional[int] = None
    lastRegistrarErrorTimestamp: Optional[int] = None
    rejectionReason: Optional[str] = None


class GetICBufferStatusResponse(OmsResponse):
    """Status of the IC buffer for an order and GTIN."""

    omsId: str = Field(description="OMS identifier")
    orderId: str = Field(description="Order identifier")
    gtin: str = Field(description="Product GTIN")
    bufferStatus: str = Field(description="Buffer state, e.g. ACTIVE or EXHAUSTED")
    leftInBuffer: Optional[int] = Field(
        default=None, description="Codes still available in the buffer"
    )
    totalCodes: Optional[int] = None
    unavailableCodes: Optional[int] = None
    availableCodes: Optional[int] = None
    totalPassed: Optional[int] = None
    poolsExhausted: Optional[bool] = None
    rejectionReason: Optional[str] = None
    expiredDate: Optional[int] = None
    poolInfos: list[PoolInfo] = Field(default_factory=list)


class GetICsFromOrderResponse(OmsResponse):
    """A block of codes fetched from an order buffer."""

    omsId: str = Field(description="OMS identifier")
    codes: list[str] = Field(description="Identification codes in this block")
    blockId: str = Field(description="Cursor to pass as lastBlockId next time")


class CloseICArrayResponse(OmsResponse):
    """Confirmation that a code array was closed."""

    omsId: str = Field(description="OMS identifier")
