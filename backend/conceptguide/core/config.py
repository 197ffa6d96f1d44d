import os
from dotenv import load_dotenv

# Load .env from the backend directory
load_dotenv(os.path.join(os.path.dirname(__file__), "..", "..", ".env"))

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
PACKAGE_DIR = os.path.abspath(os.path.join(BASE_DIR, ".."))
BACKEND_DIR = os.path.abspath(os.path.join(PACKAGE_DIR, ".."))

# Public site address used for canonical, Open Graph and JSON-LD URLs
BASE_URL: str = os.getenv("BASE_URL", "https://your-domain.vercel.app")
SITE_NAME: str = os.getenv("SITE_NAME", "Programming Concepts Guide")
SITE_TAGLINE: str = "Learn Essential Dev Skills"

# Bundled content, read once at startup
CONCEPTS_DATA_PATH: str = os.getenv(
    "CONCEPTS_DATA_PATH",
    os.path.join(PACKAGE_DIR, "data", "concepts.json"),
)
STATIC_DIR: str = os.path.join(PACKAGE_DIR, "static")

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

HOST: str = os.getenv("HOST", "127.0.0.1")
PORT: int = int(os.getenv("PORT", "8000"))
