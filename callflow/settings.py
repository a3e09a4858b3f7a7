import os
from typing import Optional
from urllib.parse import urlparse

from dotenv import load_dotenv

# Load .env file variables into environment
load_dotenv(verbose=True)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


class Settings:
    """Application configuration settings loaded from environment variables."""

    # --- Status page Settings ---
    STATUS_OVERWRITE: bool = False
    ADMIN_EMAIL: Optional[str] = None
    HOME_URI: Optional[str] = None

    # --- Transport Settings ---
    BACKEND_URL: Optional[str] = None
    TRANSPORT_TIMEOUT: float = 30.0

    # --- Status page Getters ---
    def get_status_overwrite(self) -> bool:
        """Returns whether generated status pages replace an existing output."""
        value = os.getenv("STATUS_OVERWRITE", "false").strip().lower()
        if value in _TRUE_VALUES:
            return True
        if value in _FALSE_VALUES:
            return False
        raise ValueError(f"STATUS_OVERWRITE environment variable must be a boolean, got '{value}'.")

    def get_admin_email(self) -> Optional[str]:
        """Returns the administrator email shown on status pages, if set."""
        return os.getenv("ADMIN_EMAIL") or None

    def get_home_uri(self) -> Optional[str]:
        """Returns the home URI shown on status pages, if set."""
        return os.getenv("HOME_URI") or None

    # --- Transport Getters ---
    def get_backend_url(self) -> Optional[str]:
        """Returns the backend URL as a string, if set."""
        url = os.getenv("BACKEND_URL")
        if url:
            parsed = urlparse(url)
            if not all([parsed.scheme, parsed.netloc]):
                raise ValueError(f"Invalid BACKEND_URL format: {url}")
        return url

    def get_transport_timeout(self) -> float:
        """Returns the transport timeout in seconds."""
        try:
            return float(os.getenv("TRANSPORT_TIMEOUT", "30"))
        except ValueError:
            raise ValueError("TRANSPORT_TIMEOUT environment variable must be a number.")

    def get_filters_filepath(self) -> Optional[str]:
        """Returns the path to the JSON filter chain description, if set."""
        return os.getenv("FILTERS_FILEPATH") or None

    # --- Logging Settings ---
    def get_log_level(self, default: str = "INFO") -> str:
        """Gets the configured log level, defaulting if not set."""
        return os.getenv("LOG_LEVEL", default).upper()
