from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App settings
    PROJECT_NAME: str = "SubscriptionAuditor"
    LOG_LEVEL: str = Field(default="INFO")

    # Modeling assumptions
    ANNUAL_RETURN_RATE: float = Field(default=0.07, ge=0)
    PRICE_HIKE_RATE: float = Field(default=0.08, ge=0)  # subs increase ~8%/yr historically
    PRICE_HIKE_HORIZONS: List[int] = Field(default_factory=lambda: [3, 5])

    # Projection timeline
    DEFAULT_PROJECTION_YEARS: int = Field(default=10, gt=0)
    PROJECTION_YEAR_CHOICES: List[int] = Field(default_factory=lambda: [5, 10, 20, 30])
    LIFETIME_YEARS: int = Field(default=40, gt=0)

    # Reality check
    DEFAULT_ANNUAL_SALARY: float = Field(default=60000.0, ge=0)
    WORK_HOURS_PER_YEAR: int = Field(default=2080, gt=0)  # 40 hours x 52 weeks

    # Fixed-divisor calendar
    DAYS_PER_MONTH: int = Field(default=30, gt=0)
    WEEKS_PER_YEAR: int = Field(default=52, gt=0)

    # Everyday reference prices
    COFFEE_PRICE: float = Field(default=5.0, gt=0)
    GROCERY_WEEK_COST: float = Field(default=150.0, gt=0)
    DOMESTIC_FLIGHT_COST: float = Field(default=350.0, gt=0)

    # Dashboard rankings
    TOP_SAVINGS_COUNT: int = 3
    TOP_DRAINS_COUNT: int = 8
    SAVINGS_HORIZON_YEARS: int = 10

    # Preset catalog, bundled JSON when unset
    PRESETS_JSON: Optional[str] = Field(default=None)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="AUDITOR_",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
