"""
Storefront Configuration

Centralized configuration for the storefront client.
All settings can be overridden via environment variables.
"""
import os
from typing import Optional


class StorefrontConfig:
    """
    Central configuration for the storefront client.

    Example:
        >>> from storefront.config import config
        >>> print(config.SEARCH_DEBOUNCE_DESKTOP_MS)
        500

        # Override via environment:
        >>> os.environ["SEARCH_DEBOUNCE_DESKTOP_MS"] = "750"
        >>> config = StorefrontConfig()  # Reload
    """

    # ========================================================================
    # Backend API
    # ========================================================================

    API_BASE_URL: str = os.getenv("API_BASE_URL", "http://localhost:8082/api/v1")
    """Base URL of the storefront REST API"""

    HTTP_TIMEOUT_SECONDS: float = float(os.getenv("HTTP_TIMEOUT_SECONDS", "30"))
    """Per-request timeout for every API call"""

    # ========================================================================
    # Search
    # ========================================================================

    SEARCH_DEBOUNCE_DESKTOP_MS: int = int(os.getenv("SEARCH_DEBOUNCE_DESKTOP_MS", "500"))
    """Quiescence window for the desktop search box"""

    SEARCH_DEBOUNCE_MOBILE_MS: int = int(os.getenv("SEARCH_DEBOUNCE_MOBILE_MS", "300"))
    """Quiescence window for the mobile search box"""

    # ========================================================================
    # Session
    # ========================================================================

    REDIS_URL: Optional[str] = os.getenv("REDIS_URL")
    """Redis backend for the session store; in-memory when unset"""

    SESSION_KEY_PREFIX: str = os.getenv("SESSION_KEY_PREFIX", "storefront:session:")
    """Prefix for the token/username/balance keys"""

    # ========================================================================
    # Logging Settings
    # ========================================================================

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    """Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL"""

    @classmethod
    def to_dict(cls) -> dict:
        """Export the public settings as a dictionary."""
        return {
            key: getattr(cls, key)
            for key in dir(cls)
            if key.isupper() and not key.startswith("_")
        }


config = StorefrontConfig()
