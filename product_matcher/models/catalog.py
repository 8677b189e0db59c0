"""Pydantic models for catalog products and marketplace listings."""
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_serializer

from product_matcher.utils.normalization import (
    first_word,
    normalize,
    normalize_tokens,
    normalized_manufacturer,
)


class Product(BaseModel):
    """A catalog product that listings are matched against.

    The product name is usually manufacturer + "_" + optional family + "_" +
    model, but sometimes carries model fragments found in no other field
    (e.g. "Casio-EX-ZR100" for model "ZR100", family "Exilim").
    """

    model: str = Field(..., description="Model identifier as it appears in the catalog")
    announced_date: datetime = Field(
        ...,
        validation_alias=AliasChoices("announced-date", "announced_date"),
        serialization_alias="announced-date",
        description="Date the product was announced",
    )
    product_name: str = Field(..., description="Display name, e.g. Sony_Cyber-shot_DSC-W310")
    family: Optional[str] = Field(default=None, description="Product line, e.g. Cyber-shot")
    manufacturer: str = Field(..., description="Raw manufacturer name")

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "product_name": "Sony_Cyber-shot_DSC-W310",
                "manufacturer": "Sony",
                "model": "DSC-W310",
                "family": "Cyber-shot",
                "announced-date": "2010-01-06T19:00:00.000-05:00",
            }
        },
    )

    @field_serializer("announced_date")
    def serialize_announced_date(self, value: datetime) -> str:
        """Keep the catalog's millisecond ISO-8601 layout on output."""
        return value.isoformat(timespec="milliseconds")

    @property
    def normalized_manufacturer(self) -> str:
        return normalized_manufacturer(self.manufacturer)

    @property
    def normalized_model(self) -> str:
        """Model key used as the base of every index key for this product.

        Bare numbers such as "100" collide across product lines, so an
        all-digit model is qualified with the family (or, lacking one, the
        manufacturer): "Cyber-shot" + "100" -> "cybershot100".
        """
        if self.model.isdigit():
            qualifier = self.family if self.family else self.normalized_manufacturer
            return normalize_tokens([qualifier.lower(), self.model])
        return normalize(self.model)


class Listing(BaseModel):
    """A marketplace listing to be matched against the catalog."""

    title: str = Field(..., description="Free-text listing title")
    manufacturer: str = Field(..., description="Raw manufacturer name, e.g. Canon Canada")
    currency: str = Field(..., description="Currency code (USD, EUR, CAD, ...)")
    price: Decimal = Field(..., description="Listed price, kept at full precision")

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "title": "Canon PowerShot A495 10.1 MP Digital Camera (Blue)",
                "manufacturer": "Canon Canada",
                "currency": "CAD",
                "price": "89.99",
            }
        },
    )

    @property
    def normalized_manufacturer(self) -> str:
        return normalized_manufacturer(self.manufacturer)

    @property
    def alternative_manufacturer(self) -> str:
        """Guess the manufacturer from the first word of the title.

        Titles conventionally lead with the brand, which covers listings whose
        manufacturer field holds a reseller or distributor name.
        """
        return normalize(first_word(self.title))
