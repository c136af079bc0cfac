import os
from typing import List
from pydantic import BaseModel


def _csv(value: str) -> List[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


class Settings(BaseModel):
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))
    environment: str = os.getenv("APP_ENV", "development")

    static_dir: str = os.getenv("STATIC_DIR", os.path.abspath(os.path.join(os.path.dirname(__file__), "static")))

    cors_origins: List[str] = _csv(os.getenv("CORS_ORIGINS", "*"))

    # Unknown gender/type answers 400 instead of the generic 500
    strict_categories: bool = os.getenv("STRICT_CATEGORIES", "0") == "1"


settings = Settings()
