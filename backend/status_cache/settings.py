"""
Server Configuration

Startup parameters for the status image cache. All three are required;
there is no other runtime configuration.
"""

from pathlib import Path
from pydantic import BaseModel, Field, field_validator


class ServerConfig(BaseModel):
    """Validated startup configuration."""
    host: str = Field(..., min_length=1, description="Address to listen on")
    port: int = Field(..., ge=1, le=65535, description="Port to listen on")
    cache_dir: Path = Field(..., description="Directory holding cached images")

    @field_validator("cache_dir")
    @classmethod
    def resolve_cache_dir(cls, value: Path) -> Path:
        return value.expanduser().resolve()

    @property
    def base_url(self) -> str:
        return f"http://{self.host}:{self.port}"
