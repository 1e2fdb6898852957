"""
Ad Submission Models — The advertisement payload handed to the engine.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Category(str, Enum):
    """Category codes offered by the ad-posting flow."""

    VEHICLES = "vehicles"
    REAL_ESTATE = "real-estate"
    COMMERCIAL_PROPERTY = "commercial-property"
    JOBS = "jobs"
    SERVICES = "services"
    FASHION = "fashion"
    DIGITAL_GOODS = "digital-goods"
    PETS = "pets"
    IT_WEB_SERVICES = "it-web-services"
    COURSES_TRAINING = "courses-training"
    DRIVING_LESSONS = "driving-lessons"
    MUSIC_LESSONS = "music-lessons"
    FITNESS_COACH = "fitness-coach"
    FOOD_CATERING = "food-catering"
    TRAVEL_AGENCY = "travel-agency"
    ACCOUNTANCY = "accountancy"
    LEGAL = "legal"
    MEDICAL = "medical"
    VISA = "visa"
    CURRENCY_EXCHANGE = "currency-exchange"
    RESTAURANT_EQUIPMENT = "restaurant-equipment"
    SUPERMARKET_WHOLESALERS = "supermarket-wholesalers"
    BARBER_HAIRDRESSER = "barber-hairdresser"
    TATTOO_SERVICES = "tattoo-services"
    INTERPRETER_TRANSLATION = "interpreter-translation"
    OTHER = "other"


class AdSubmission(BaseModel):
    """
    A submitted advertisement.

    The engine does not validate submissions: missing text behaves as an
    empty string and a missing price as zero. Category codes outside
    ``Category`` are accepted and match no category-specific rule.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str = Field(default="", description="Ad title")
    title_localized: str = Field(
        default="", alias="titleLocalized", description="Ad title, second language"
    )
    description: str = Field(default="", description="Ad body text")
    description_localized: str = Field(
        default="",
        alias="descriptionLocalized",
        description="Ad body text, second language",
    )
    images: tuple[str, ...] = Field(
        default=(), description="Image URLs or opaque identifiers, in display order"
    )
    category: str = Field(default="", description="Category code, e.g. 'vehicles'")
    price: float = Field(default=0.0, description="Asking price")

    @field_validator(
        "title", "title_localized", "description", "description_localized", "category",
        mode="before",
    )
    @classmethod
    def _none_as_empty(cls, value):
        return "" if value is None else value

    @field_validator("images", mode="before")
    @classmethod
    def _none_as_no_images(cls, value):
        return () if value is None else value

    @field_validator("price", mode="before")
    @classmethod
    def _none_as_zero(cls, value):
        return 0.0 if value is None else value

    @property
    def all_text(self) -> str:
        """All four text fields, space-joined and lowercased."""
        return " ".join(
            [self.title, self.title_localized, self.description, self.description_localized]
        ).lower()

    @property
    def listing_text(self) -> str:
        """Primary-language title and description, lowercased."""
        return f"{self.title} {self.description}".lower()
