from pydantic_settings import BaseSettings

# Legacy fallback used when TIMELINE_SESSION_SECRET is not set. Kept for compatibility with
# existing deployments; startup logs a warning whenever it is in effect.
DEFAULT_SESSION_SECRET = "your-secret-key-min-32-chars!!"  # noqa: S105


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    host: str = "127.0.0.1"
    port: int = 3000
    debug: bool = False
    production: bool = False  # Enables the Secure attribute on the session cookie
    session_secret: str = DEFAULT_SESSION_SECRET  # HS256 key for signing session tokens
    backend_url: str = "http://localhost:8080"  # Base URL of the timeline backend API
    backend_timeout: float = 10.0  # Seconds per backend request
    cors_origins: list[str] = []

    model_config = {
        "env_file": [".env"],
        "env_prefix": "TIMELINE_",
        "extra": "ignore",
    }

    @property
    def uses_default_secret(self) -> bool:
        return self.session_secret == DEFAULT_SESSION_SECRET
