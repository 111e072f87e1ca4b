from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator
from pydantic.alias_generators import to_camel

from styleai.media import parse_data_uri

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

PHOTO_DESCRIPTION = (
    "A photo as a data URI that must include a MIME type and use Base64 encoding. "
    "Expected format: 'data:<mimetype>;base64,<encoded_data>'."
)


class CamelModel(BaseModel):
    """Snake_case attributes, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PhotoInput(CamelModel):
    photo_data_uri: str = Field(description=PHOTO_DESCRIPTION)

    @field_validator("photo_data_uri")
    @classmethod
    def _check_photo(cls, value: str) -> str:
        parse_data_uri(value)
        return value.strip()


# Body analysis

class AnalyzeBodyTypeInput(PhotoInput):
    pass


class AnalyzeBodyTypeOutput(CamelModel):
    body_type: NonEmptyStr = Field(description="The user's body type.")
    undertone: NonEmptyStr = Field(description="The user's skin undertone (warm, cool, neutral).")


# Trending clothes

class IdentifyTrendingClothesInput(PhotoInput):
    pass


class IdentifyTrendingClothesOutput(CamelModel):
    trending_clothes: list[str] = Field(description="A list of trending clothes identified in the outfit.")


# Clothing pairing

class SuggestClothingPairingsInput(CamelModel):
    body_type: NonEmptyStr = Field(description="The user's body type.")
    body_shape: NonEmptyStr = Field(description="The user's body shape.")
    color_palette: NonEmptyStr = Field(description="The user's seasonal color palette.")


class SuggestClothingPairingsOutput(CamelModel):
    suggested_outfit: list[NonEmptyStr] = Field(
        min_length=1, description="The garments and accessories of the suggested outfit."
    )
    reasoning: NonEmptyStr = Field(description="Why this outfit suits the user.")


# Wardrobe pairing

class ClothingItem(PhotoInput):
    description: NonEmptyStr = Field(description="A short description of the clothing item.")
    type: NonEmptyStr = Field(description="The kind of clothing item, e.g. shirt, pants, shoes.")
    color: NonEmptyStr = Field(description="The main color of the clothing item.")


class PairWardrobeOutfitsInput(CamelModel):
    clothing_items: list[ClothingItem] = Field(min_length=1, description="The items in the user's wardrobe.")


class OutfitItem(CamelModel):
    type: NonEmptyStr = Field(description="The kind of clothing item.")
    description: NonEmptyStr = Field(description="The wardrobe item's description.")


class OutfitSuggestion(CamelModel):
    description: NonEmptyStr = Field(description="A short description of the outfit.")
    items: list[OutfitItem] = Field(min_length=1, description="The wardrobe items that make up the outfit.")


class PairWardrobeOutfitsOutput(CamelModel):
    suggested_outfits: list[OutfitSuggestion] = Field(description="Outfits built from the wardrobe items.")


# HTTP

class StyleOptionsResponse(CamelModel):
    body_types: list[str]
    body_shapes: list[str]
    color_palettes: list[str]


class ErrorResponse(BaseModel):
    status: str = "error"
    kind: str
    error: str
    details: list[dict] | None = None


class HealthResponse(BaseModel):
    status: str
