"""Chat configuration with environment variable loading.

Pydantic-based configuration for the Gemini generation endpoint. The
credential is optional here: a missing key is reported to the user as a
bot turn when sending, not raised at startup.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()


def _api_key_from_env() -> str | None:
    return os.getenv("GEMINI_API_KEY") or os.getenv("NEXT_PUBLIC_GEMINI_API_KEY")


class ChatConfig(BaseModel):
    """Configuration for the generation service client.

    Attributes:
        api_key: Credential passed as the ``key`` query parameter.
        base_url: API base URL, without the model path.
        model_name: Model identifier to use.
        timeout: Transport timeout in seconds for the single request.
    """

    api_key: str | None = Field(
        default_factory=_api_key_from_env,
        description="API key for the Gemini API",
    )
    base_url: str = Field(
        default_factory=lambda: os.getenv(
            "GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta"
        ),
        description="API base URL",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("GEMINI_MODEL", "gemini-2.5-flash"),
        description="Model to use",
    )
    timeout: float = Field(
        default=120.0,
        gt=0.0,
        le=600.0,
        description="Request timeout in seconds",
    )

    @field_validator("api_key")
    @classmethod
    def normalize_api_key(cls, v: str | None) -> str | None:
        """Strip the key and treat blank values as missing."""
        if v is None or not v.strip():
            return None
        return v.strip()

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def endpoint(self) -> str:
        """URL of the generateContent method for the configured model."""
        return f"{self.base_url}/models/{self.model_name}:generateContent"


def get_chat_config() -> ChatConfig:
    """Create chat configuration from environment.

    Returns:
        Configured ChatConfig instance.
    """
    return ChatConfig()
