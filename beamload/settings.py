import os

from dotenv import load_dotenv

load_dotenv()


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return float(raw)


BEAM_CATALOG_PATH = os.getenv("BEAM_CATALOG_PATH") or None
DEFAULT_MAX_WIDTH = _float_env("DEFAULT_MAX_WIDTH", 240.0)
DEFAULT_FIXED_GAP = _float_env("DEFAULT_FIXED_GAP", 0.0)
DEFAULT_WOOD_HEIGHT = _float_env("DEFAULT_WOOD_HEIGHT", 10.0)
CORS_ALLOW_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
    if origin.strip()
]
LOG_DIR = os.getenv("LOG_DIR", "logs")
