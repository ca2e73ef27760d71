import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv


load_dotenv()


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "")
    if not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


@dataclass(frozen=True)
class Config:
    """Application configuration loaded from environment variables.

    Provides validated access to the Supabase record store and the admin
    paging defaults.
    """

    SUPABASE_URL: str = field(default_factory=lambda: os.getenv("SUPABASE_URL", ""))
    SUPABASE_SERVICE_KEY: str = field(default_factory=lambda: os.getenv("SUPABASE_SERVICE_KEY", ""))
    ENVIRONMENT: str = field(default_factory=lambda: os.getenv("ENVIRONMENT", "production"))

    CORS_ALLOWED_ORIGINS_ENV: str = field(default_factory=lambda: os.getenv("CORS_ALLOWED_ORIGINS", "http://localhost:3000"))

    ADMIN_TITLE: str = field(default_factory=lambda: os.getenv("ADMIN_TITLE", "Admin"))
    ADMIN_PER_PAGE: int = field(default_factory=lambda: _env_int("ADMIN_PER_PAGE", 25))
    ADMIN_MAX_PER_PAGE: int = field(default_factory=lambda: _env_int("ADMIN_MAX_PER_PAGE", 100))

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"

    def allowed_origins(self, extra_origins: List[str] | None = None) -> List[str]:
        env_origins = [o.strip() for o in self.CORS_ALLOWED_ORIGINS_ENV.split(",") if o.strip()]
        defaults = [
            "http://localhost:8080",
            "http://127.0.0.1:8080",
        ]
        merged = env_origins + defaults
        if extra_origins:
            merged.extend(extra_origins)
        # Deduplicate while preserving order
        seen = set()
        result: List[str] = []
        for origin in merged:
            if origin not in seen:
                seen.add(origin)
                result.append(origin)
        return result

    def validate(self) -> None:
        if self.ADMIN_PER_PAGE < 1:
            raise ValueError("ADMIN_PER_PAGE must be at least 1")
        if self.ADMIN_MAX_PER_PAGE < self.ADMIN_PER_PAGE:
            raise ValueError("ADMIN_MAX_PER_PAGE must not be lower than ADMIN_PER_PAGE")
        if self.is_development:
            return
        if not self.SUPABASE_URL:
            raise ValueError("SUPABASE_URL environment variable is required")
        if not self.SUPABASE_SERVICE_KEY:
            raise ValueError("SUPABASE_SERVICE_KEY environment variable is required")
