from typing import Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

from subscription_auditor.models.category import OTHER


class SubscriptionCreate(BaseModel):
    name: str
    price: float = Field(ge=0, allow_inf_nan=False)
    category: str = OTHER
    alternative: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be empty")
        return value

    @field_validator("category", mode="before")
    @classmethod
    def default_blank_category(cls, value: Optional[str]) -> str:
        # Unknown names are kept as-is; only a missing value becomes Other.
        if value is None or (isinstance(value, str) and not value.strip()):
            return OTHER
        return value


class Preset(BaseModel):
    """A ready-made subscription template from the preset catalog."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    price: float = Field(ge=0, allow_inf_nan=False)
    category: str = OTHER
    alternative: Optional[str] = Field(default=None, alias="alt")

    def to_create(self) -> SubscriptionCreate:
        return SubscriptionCreate(
            name=self.name,
            price=self.price,
            category=self.category,
            alternative=self.alternative,
        )


class Subscription(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid4().hex)
    name: str
    price: float
    category: str = OTHER
    alternative: Optional[str] = None
    is_preset: bool = False

    @property
    def yearly(self) -> float:
        return self.price * 12
