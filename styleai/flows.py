"""The four fashion flows: body analysis, trend spotting, outfit pairing, wardrobe pairing."""

from styleai.models import (
    AnalyzeBodyTypeInput,
    AnalyzeBodyTypeOutput,
    IdentifyTrendingClothesInput,
    IdentifyTrendingClothesOutput,
    PairWardrobeOutfitsInput,
    PairWardrobeOutfitsOutput,
    SuggestClothingPairingsInput,
    SuggestClothingPairingsOutput,
)
from styleai.prompting import define_flow, define_prompt

ANALYZE_BODY_TYPE_PROMPT = """You are a fashion expert, skilled in analyzing body types and skin undertones from images.

Analyze the user's body type and skin undertone from the provided photo (image 1). The undertone should be warm, cool, or neutral."""

IDENTIFY_TRENDING_CLOTHES_PROMPT = """You are a fashion expert. Analyze the outfit in the provided photo (image 1) and identify the trending clothes.

Return a list of trending clothes identified in the outfit. If nothing in the outfit is currently trending, return an empty list."""

SUGGEST_CLOTHING_PAIRINGS_PROMPT = """You are a personal stylist. Suggest one complete outfit for a person with the following features:

Body type: {body_type}
Body shape: {body_shape}
Color palette: {color_palette}

List every garment, shoe and accessory in the outfit, then explain why the outfit flatters this body type, body shape and color palette."""

PAIR_WARDROBE_OUTFITS_PROMPT = """You are a personal stylist. The user's wardrobe contains the items below. Item N is shown in image N.

{items}

Combine these items into complete, stylish outfits. Only use items from this wardrobe and never invent new ones. For each outfit, write a short description of the look and list the items it uses by their type and description."""


def _wardrobe_context(data: PairWardrobeOutfitsInput) -> dict[str, str]:
    lines = [
        f"{i}. {item.type}: {item.description} (color: {item.color})"
        for i, item in enumerate(data.clothing_items, start=1)
    ]
    return {"items": "\n".join(lines)}


def _single_photo(data: AnalyzeBodyTypeInput | IdentifyTrendingClothesInput) -> list[str]:
    return [data.photo_data_uri]


def _wardrobe_photos(data: PairWardrobeOutfitsInput) -> list[str]:
    return [item.photo_data_uri for item in data.clothing_items]


analyze_body_type_prompt = define_prompt(
    name="analyzeBodyTypePrompt",
    template=ANALYZE_BODY_TYPE_PROMPT,
    input_model=AnalyzeBodyTypeInput,
    output_model=AnalyzeBodyTypeOutput,
    context=lambda data: {},
    media=_single_photo,
)
analyze_body_type = define_flow("analyzeBodyTypeFlow", analyze_body_type_prompt)


identify_trending_clothes_prompt = define_prompt(
    name="identifyTrendingClothesPrompt",
    template=IDENTIFY_TRENDING_CLOTHES_PROMPT,
    input_model=IdentifyTrendingClothesInput,
    output_model=IdentifyTrendingClothesOutput,
    context=lambda data: {},
    media=_single_photo,
)
identify_trending_clothes = define_flow("identifyTrendingClothesFlow", identify_trending_clothes_prompt)


suggest_clothing_pairings_prompt = define_prompt(
    name="suggestClothingPairingsPrompt",
    template=SUGGEST_CLOTHING_PAIRINGS_PROMPT,
    input_model=SuggestClothingPairingsInput,
    output_model=SuggestClothingPairingsOutput,
)
suggest_clothing_pairings = define_flow("suggestClothingPairingsFlow", suggest_clothing_pairings_prompt)


pair_wardrobe_outfits_prompt = define_prompt(
    name="pairWardrobeOutfitsPrompt",
    template=PAIR_WARDROBE_OUTFITS_PROMPT,
    input_model=PairWardrobeOutfitsInput,
    output_model=PairWardrobeOutfitsOutput,
    context=_wardrobe_context,
    media=_wardrobe_photos,
)
pair_wardrobe_outfits = define_flow("pairWardrobeOutfitsFlow", pair_wardrobe_outfits_prompt)
