import os

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_BASE_URL = "https://nominatim.openstreetmap.org/"  # public Nominatim instance
DEFAULT_USER_AGENT = "NominatimGeocoder/1.0"  # required by the Nominatim usage policy
DEFAULT_TIMEOUT = 10


class ClientConfig(BaseModel):
    """Settings of one GeocodingClient. None of them is sent anywhere until a query runs."""
    model_config = ConfigDict(extra="forbid")

    base_url: str = DEFAULT_BASE_URL
    username: str = ""  # empty means no HTTP auth
    password: str = ""
    user_agent: str = DEFAULT_USER_AGENT
    email: str = ""  # contact address for the service operators
    normalize_addresses: bool = True
    timeout: float = DEFAULT_TIMEOUT

    @field_validator("base_url")
    @classmethod
    def ensure_trailing_slash(cls, v: str) -> str:
        return v if v.endswith("/") else v + "/"

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Build a config from NOMINATIM_* environment variables, falling back to defaults."""
        normalize = os.getenv("NOMINATIM_NORMALIZE_ADDRESSES", "1")
        return cls(
            base_url=os.getenv("NOMINATIM_BASE_URL", DEFAULT_BASE_URL),
            username=os.getenv("NOMINATIM_USERNAME", ""),
            password=os.getenv("NOMINATIM_PASSWORD", ""),
            user_agent=os.getenv("NOMINATIM_USER_AGENT", DEFAULT_USER_AGENT),
            email=os.getenv("NOMINATIM_EMAIL", ""),
            normalize_addresses=normalize.strip().lower() not in ("0", "false", "no", "off"),
            timeout=float(os.getenv("NOMINATIM_TIMEOUT", DEFAULT_TIMEOUT)),
        )
