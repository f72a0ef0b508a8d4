from pydantic import BaseModel, HttpUrl, field_validator

from ._utils.constants import DEFAULT_API_VERSION, DEFAULT_BASE_URL


class Config(BaseModel):
    secret: str
    base_url: str = DEFAULT_BASE_URL
    api_version: str = DEFAULT_API_VERSION
    timeout: float = 30.0
    max_network_retries: int = 2
    debug: bool = False

    @field_validator("base_url", mode="before")
    @classmethod
    def validate_url(cls, value: str) -> str:
        urlValue = HttpUrl(url=value)
        assert urlValue.scheme in ("http", "https"), "Invalid URL"
        return value.rstrip("/")

    @field_validator("max_network_retries")
    @classmethod
    def validate_retries(cls, value: int) -> int:
        assert value >= 0, "max_network_retries must not be negative"
        return value

    def __repr__(self) -> str:
        """Keep the API key out of logs."""
        return (
            f"Config(base_url={self.base_url!r}, api_version={self.api_version!r}, "
            f"secret='***')"
        )

    __str__ = __repr__
