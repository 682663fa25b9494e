"""
HueWheel Configuration
Manages environment variables and defaults for the palette service.
"""
import os

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Config:
    """Configuration class for HueWheel services."""

    SERVICE_NAME: str = "huewheel-palette"
    VERSION: str = "1.0.0"

    # Logging
    LOG_LEVEL: str = os.environ.get("HUEWHEEL_LOG_LEVEL", "INFO")

    # Input handling
    STRICT_VALIDATION: bool = bool(int(os.environ.get("HUEWHEEL_STRICT_VALIDATION", "0")))
    DEFAULT_SCHEME: str = os.environ.get("HUEWHEEL_DEFAULT_SCHEME", "complementary")

    # Observability
    METRICS_ENABLED: bool = bool(int(os.environ.get("HUEWHEEL_METRICS_ENABLED", "1")))
    METRICS_WINDOW: int = int(os.environ.get("HUEWHEEL_METRICS_WINDOW", "500"))  # latencies kept per scheme

    # CORS settings
    ALLOWED_ORIGINS: str = os.environ.get("HUEWHEEL_ALLOWED_ORIGINS", "*")

    @classmethod
    def allowed_origins(cls) -> list:
        """Split the comma separated CORS origin list."""
        return [origin.strip() for origin in cls.ALLOWED_ORIGINS.split(",") if origin.strip()]


# Global config instance
config = Config()
