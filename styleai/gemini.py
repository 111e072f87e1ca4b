"""Gemini client: send rendered prompt parts, get the JSON answer text back."""

import asyncio
import logging
from functools import lru_cache

from google import genai
from google.genai import types

from styleai.config import GEMINI_API_KEY, GEMINI_MODEL
from styleai.errors import ProviderError
from styleai.media import DataUri, prepare_for_upload

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_client() -> genai.Client:
    if not GEMINI_API_KEY:
        raise ProviderError("GEMINI_API_KEY is not configured")
    return genai.Client(api_key=GEMINI_API_KEY)


def _to_part(content: str | DataUri) -> str | types.Part:
    if isinstance(content, DataUri):
        photo = prepare_for_upload(content)
        return types.Part.from_bytes(data=photo.data, mime_type=photo.mime_type)
    return content


async def generate(contents: list[str | DataUri], model: str = GEMINI_MODEL) -> str:
    """Run one generate_content call and return the raw response text."""
    client = get_client()

    try:
        parts = [_to_part(c) for c in contents]
        response = await asyncio.to_thread(
            client.models.generate_content,
            model=model,
            contents=parts,
            config=types.GenerateContentConfig(response_mime_type="application/json"),
        )
    except Exception as e:
        raise ProviderError(f"Gemini request failed: {e}") from e

    text = response.text
    if not text or not text.strip():
        raise ProviderError("Gemini returned an empty response")

    logger.debug("Gemini %s answered with %d characters", model, len(text))
    return text
