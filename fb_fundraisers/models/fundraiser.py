from typing import Any, Optional
from pydantic import AwareDatetime, BaseModel, Field


class CreateFundraiserParams(BaseModel):
    """Required parameters for creating a Facebook Fundraiser."""

    model_config = {"extra": "forbid", "frozen": True}

    # Provided by Facebook Login for the user creating the fundraiser.
    access_token: str = Field(..., min_length=1)
    charity_id: str = Field(..., min_length=1)
    # Up to 70 characters, enforced by the platform.
    title: str
    # Up to 50k characters, enforced by the platform.
    description: str
    # In the currency's smallest unit: whole USD 25 is 2500, JPY 2500 is 2500.
    goal: int = Field(..., ge=0)
    # ISO 4217 code for the goal amount.
    currency: str = Field(..., min_length=3, max_length=3)
    # When the fundraiser stops accepting donations. Must be within 5 years from now.
    end_time: AwareDatetime
    # Generated by the caller to identify the fundraiser in its own system.
    external_id: str = Field(..., min_length=1)


class FundraiserResult(BaseModel):
    status_code: int
    data: dict[str, Any]

    @property
    def fundraiser_id(self) -> Optional[str]:
        value = self.data.get("id")
        return None if value is None else str(value)
