"""Deal model and its wire schemas.

``Deal`` is the registry's internal record. The request/response schemas
carry the wire names used by clients (``item``, ``endTime``, ``claimed``);
the claimant set never leaves the registry.
"""

from datetime import datetime
from typing import Set

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from deals.utils.time import ensure_utc


class Deal(BaseModel):
    """A claimable promotional offer with a capacity and an expiry."""
    id: str
    item_count: int
    price: float
    end_time: datetime
    claimed_count: int = 0
    claimants: Set[str] = Field(default_factory=set, exclude=True)

    @field_validator('end_time')
    @classmethod
    def normalize_end_time(cls, v: datetime) -> datetime:
        return ensure_utc(v)

    def is_expired(self, now: datetime) -> bool:
        """True once ``now`` is past the end time."""
        return now > self.end_time

    def is_sold_out(self) -> bool:
        return self.claimed_count >= self.item_count

    def has_claimed(self, user_id: str) -> bool:
        return user_id in self.claimants

    def snapshot(self) -> "Deal":
        """Return a detached deep copy of this deal."""
        return self.model_copy(deep=True)


class DealCreate(BaseModel):
    """Deal creation payload."""
    model_config = ConfigDict(populate_by_name=True)

    item_count: int = Field(..., alias="item", description="Number of claim slots")
    price: float = Field(..., description="Informational price")
    end_time: datetime = Field(..., alias="endTime", description="No claims are accepted after this instant")

    @field_validator('end_time')
    @classmethod
    def normalize_end_time(cls, v: datetime) -> datetime:
        """Treat naive timestamps as UTC."""
        return ensure_utc(v)


class DealUpdate(BaseModel):
    """Deal update payload. Both fields replace the stored values."""
    model_config = ConfigDict(populate_by_name=True)

    item_count: int = Field(
        ...,
        validation_alias=AliasChoices("items", "item", "item_count"),
        description="New number of claim slots"
    )
    end_time: datetime = Field(
        ...,
        validation_alias=AliasChoices("endTime", "end_time"),
        description="New end time"
    )

    @field_validator('end_time')
    @classmethod
    def normalize_end_time(cls, v: datetime) -> datetime:
        """Treat naive timestamps as UTC."""
        return ensure_utc(v)


class DealResponse(BaseModel):
    """Deal response model."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    item_count: int = Field(..., alias="item")
    price: float
    end_time: datetime = Field(..., alias="endTime")
    claimed_count: int = Field(..., alias="claimed")

    @classmethod
    def from_deal(cls, deal: Deal) -> "DealResponse":
        return cls(
            id=deal.id,
            item_count=deal.item_count,
            price=deal.price,
            end_time=deal.end_time,
            claimed_count=deal.claimed_count
        )
