import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from styleai.config import BODY_SHAPES, BODY_TYPES, COLOR_PALETTES, CORS_ORIGINS, LOG_LEVEL, MIN_WARDROBE_ITEMS
from styleai.errors import FlowError, InputValidationError, summarize_validation_errors
from styleai.flows import (
    analyze_body_type,
    identify_trending_clothes,
    pair_wardrobe_outfits,
    suggest_clothing_pairings,
)
from styleai.models import (
    AnalyzeBodyTypeInput, AnalyzeBodyTypeOutput,
    ErrorResponse, HealthResponse,
    IdentifyTrendingClothesInput, IdentifyTrendingClothesOutput,
    PairWardrobeOutfitsInput, PairWardrobeOutfitsOutput,
    StyleOptionsResponse,
    SuggestClothingPairingsInput, SuggestClothingPairingsOutput,
)

logging.basicConfig(
    level=LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Style AI")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# User-facing text per flow; the error kind tells clients what actually went wrong.
FAILURE_MESSAGES: dict[str, str] = {
    "analyzeBodyTypeFlow": "Failed to analyze the image. Please try another one.",
    "identifyTrendingClothesFlow": "Failed to identify trends from the image. Please try another one.",
    "suggestClothingPairingsFlow": "Failed to get recommendations. Please try again.",
    "pairWardrobeOutfitsFlow": "Failed to generate outfits. Please try again.",
}


GENERIC_FAILURE = "Something went wrong. Please try again."


def _error_response(status_code: int, kind: str, error: str, details: list[dict] | None = None) -> JSONResponse:
    body = ErrorResponse(kind=kind, error=error, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _error_response(
        422, InputValidationError.kind, "Invalid request.", summarize_validation_errors(exc.errors())
    )


@app.exception_handler(FlowError)
async def flow_error_handler(request: Request, exc: FlowError) -> JSONResponse:
    if isinstance(exc, InputValidationError):
        return _error_response(422, exc.kind, exc.message, exc.details)
    return _error_response(502, exc.kind, FAILURE_MESSAGES.get(exc.flow, GENERIC_FAILURE))


@app.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="ok")


@app.get("/api/style-options", response_model=StyleOptionsResponse)
async def style_options() -> StyleOptionsResponse:
    return StyleOptionsResponse(body_types=BODY_TYPES, body_shapes=BODY_SHAPES, color_palettes=COLOR_PALETTES)


@app.post("/api/analyze-body-type", response_model=AnalyzeBodyTypeOutput)
async def analyze_body(request: AnalyzeBodyTypeInput) -> AnalyzeBodyTypeOutput:
    return await analyze_body_type(request)


@app.post("/api/identify-trending-clothes", response_model=IdentifyTrendingClothesOutput)
async def identify_trends(request: IdentifyTrendingClothesInput) -> IdentifyTrendingClothesOutput:
    return await identify_trending_clothes(request)


@app.post("/api/suggest-clothing-pairings", response_model=SuggestClothingPairingsOutput)
async def suggest_pairings(request: SuggestClothingPairingsInput) -> SuggestClothingPairingsOutput:
    return await suggest_clothing_pairings(request)


@app.post("/api/pair-wardrobe-outfits", response_model=PairWardrobeOutfitsOutput)
async def pair_wardrobe(request: PairWardrobeOutfitsInput) -> PairWardrobeOutfitsOutput:
    if len(request.clothing_items) < MIN_WARDROBE_ITEMS:
        return _error_response(
            400, InputValidationError.kind, "Please add at least two items to your wardrobe."
        )
    return await pair_wardrobe_outfits(request)
