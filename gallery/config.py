"""
Configuration for the Region Gallery application.
"""
import os
from dotenv import load_dotenv

# Load environment variables for local testing
load_dotenv()

# Pagination
DEFAULT_OFFSET = 0
MAX_PAGE_LIMIT = 30

# Image listing
IMAGE_EXTENSIONS = {'.jpg', '.jpeg', '.png', '.gif', '.webp'}

# CORS
CORS_ALLOW_ORIGIN = "*"
CORS_ALLOW_METHODS = "GET, OPTIONS"
CORS_ALLOW_HEADERS = "Content-Type"


def load_settings() -> dict:
    """
    Read runtime settings from the environment.

    Returns:
        dict: Settings keyed the way Flask's app.config expects them
    """
    return {
        "DATABASE_URL": os.getenv("DATABASE_URL", ""),
        "REGION_TABLE": os.getenv("REGION_TABLE", "region"),
        "IMAGES_DIR": os.getenv("IMAGES_DIR", "images"),
        "THUMBS_DIR": os.getenv("THUMBS_DIR", "thumbs"),
        "SITE_INDEX": os.getenv("SITE_INDEX", "index.html"),
        "HOST": os.getenv("HOST", "0.0.0.0"),
        "PORT": int(os.getenv("PORT", "8080")),
    }
