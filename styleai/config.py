import os
from dotenv import load_dotenv

load_dotenv()

GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "")
GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
CORS_ORIGINS: list[str] = [
    origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()
]

MAX_PHOTO_BYTES: int = 4 * 1024 * 1024
MAX_DIMENSION: int = 1024
ALLOWED_IMAGE_TYPES: list[str] = ["image/png", "image/jpeg", "image/webp"]

MIN_WARDROBE_ITEMS: int = 2

BODY_TYPES: list[str] = ["Hourglass", "Pear", "Apple", "Rectangle", "Inverted Triangle"]
BODY_SHAPES: list[str] = ["Triangle", "Inverted Triangle", "Rectangle", "Hourglass", "Oval", "Diamond"]
COLOR_PALETTES: list[str] = ["Spring", "Summer", "Autumn", "Winter"]
