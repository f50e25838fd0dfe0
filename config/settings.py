"""
Application settings loaded from environment variables.
"""

from pydantic_settings import BaseSettings

_DEFAULT_JWT_SECRET = "change-me-jwt-secret-key"
_DEFAULT_COOKIE_SECRET = "change-me-cookie-secret-key"


class Settings(BaseSettings):
    # ── Security Secrets ──────────────────────────────────────────────────
    # Defaults are for local development only.
    jwt_secret: str = _DEFAULT_JWT_SECRET           # HS256 key for session tokens
    jwt_expiry_seconds: int = 604800                # 7 days
    cookie_secret: str = _DEFAULT_COOKIE_SECRET     # HMAC key for the session cookie
    bcrypt_rounds: int = 10

    # ── Deployment ───────────────────────────────────────────────────────
    environment: str = "development"
    vercel: str = ""                    # set to "1" by the Vercel runtime

    # ── Database ─────────────────────────────────────────────────────────
    database_url: str = "sqlite+aiosqlite:///./auth.db"

    # ── Server ───────────────────────────────────────────────────────────
    port: int = 3000
    host: str = "0.0.0.0"
    debug: bool = False
    # Deployed frontends beyond these come from CORS_ORIGINS.
    cors_origins: list = [
        "http://localhost:5173",
        "http://localhost:3000",
        "https://test-frontend-pied-nu.vercel.app",
    ]

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
    }

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production" or self.vercel == "1"

    def uses_default_secrets(self) -> bool:
        return (
            self.jwt_secret == _DEFAULT_JWT_SECRET
            or self.cookie_secret == _DEFAULT_COOKIE_SECRET
        )


def load_settings() -> Settings:
    """Build the settings object once, at process start."""
    return Settings()
