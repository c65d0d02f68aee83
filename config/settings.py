"""Pydantic settings for the Aave markets reader."""

from functools import lru_cache
from typing import Dict, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Alchemy network slugs per chain id
ALCHEMY_NETWORKS: Dict[int, str] = {
    1: "eth-mainnet",
    10: "opt-mainnet",
    56: "bnb-mainnet",
    137: "polygon-mainnet",
    8453: "base-mainnet",
    42161: "arb-mainnet",
    43114: "avax-mainnet",
}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # RPC
    alchemy_api_key: Optional[str] = Field(default=None, description="Alchemy API key used for RPC endpoints")
    rpc_urls: Dict[int, str] = Field(
        default_factory=dict,
        description="Per-chain RPC URL overrides, JSON encoded (chain id -> URL)",
    )
    rpc_request_timeout: int = Field(default=30, ge=1, le=300, description="RPC request timeout in seconds")

    # Logging
    log_level: str = Field(default="WARNING", description="Root log level for the CLI")

    @field_validator("log_level", mode="before")
    @classmethod
    def parse_log_level(cls, v):
        """Normalize log level names."""
        if isinstance(v, str):
            return v.strip().upper() or "WARNING"
        return v

    def alchemy_rpc_url(self, chain_id: int) -> Optional[str]:
        """Get the Alchemy RPC URL for a chain, if a key is set and the chain is served."""
        network = ALCHEMY_NETWORKS.get(int(chain_id))
        if self.alchemy_api_key and network:
            return f"https://{network}.g.alchemy.com/v2/{self.alchemy_api_key}"
        return None

    def rpc_url_for(self, chain_id: int) -> Optional[str]:
        """Resolve the configured RPC URL for a chain (override first, then Alchemy)."""
        return self.rpc_urls.get(int(chain_id)) or self.alchemy_rpc_url(chain_id)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
