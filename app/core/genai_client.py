# app/core/genai_client.py
"""
Description assistant backed by Google Gemini (google-genai).

Responsibilities:
  - Build a single cached Gemini client from settings.
  - Provide generate_product_description(...) for the product form.

The assistant is advisory only: it never raises. Missing configuration or
any API failure yields a fallback string instead.

Typical .env configuration:

    GEMINI_API_KEY=<key from Google AI Studio>
    GEMINI_MODEL=gemini-3-flash-preview
    DESCRIPTION_LANGUAGE=Bengali
"""

import logging
from functools import lru_cache

from google import genai

from app.core.config import get_settings

logger = logging.getLogger(__name__)

EMPTY_RESPONSE_FALLBACK = "No description could be generated."
FAILURE_FALLBACK = "AI description generation failed."


@lru_cache
def gemini_client() -> genai.Client:
    """
    Create a Gemini client with the configured API key.

    Raises:
        RuntimeError: if GEMINI_API_KEY is not set.
    """
    settings = get_settings()
    if not settings.GEMINI_API_KEY:
        raise RuntimeError("Missing GEMINI_API_KEY in .env")
    return genai.Client(api_key=settings.GEMINI_API_KEY)


def build_prompt(product_name: str, price: int, language: str) -> str:
    return (
        "Write a short, attractive description for a product.\n"
        f"Product name: {product_name}\n"
        f"Price: {price} Taka\n"
        f"The output must be in {language} and only 2-3 sentences long."
    )


async def generate_product_description(product_name: str, price: int) -> str:
    """
    Ask Gemini for a 2-3 sentence product description.

    Returns the generated text, or a fallback string on any failure.
    """
    settings = get_settings()
    try:
        client = gemini_client()
        response = await client.aio.models.generate_content(
            model=settings.GEMINI_MODEL,
            contents=build_prompt(product_name, price, settings.DESCRIPTION_LANGUAGE),
        )
    except Exception as e:
        logger.error("Gemini API error: %s", e)
        return FAILURE_FALLBACK

    text = (response.text or "").strip()
    return text or EMPTY_RESPONSE_FALLBACK
