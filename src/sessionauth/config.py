from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    host: str = "0.0.0.0"  # noqa: S104
    port: int = Field(ge=1, le=65535)
    debug: bool = False
    jwt_secret: str = Field(min_length=1)  # HMAC key for signed tokens, loaded once
    id_size: int  # Length in hex characters of session ids and API credentials
    users: dict[str, str] = {"JohnDoe": "5f4dcc3b5aa765d61d8327deb882cf99"}  # username -> password
    token_ttl_seconds: int = Field(default=300, gt=0)
    session_ttl_days: int = Field(default=30, gt=0)

    model_config = {
        "env_file": [".env"],
        "env_prefix": "SESSIONAUTH_",
        "extra": "ignore",
    }

    @field_validator("id_size")
    @classmethod
    def _check_id_size(cls, value: int) -> int:
        if value <= 0 or value % 2 != 0:
            raise ValueError("id_size must be a positive even number")
        return value
