"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from decimal import Decimal

from pydantic_settings import BaseSettings, SettingsConfigDict


class WalletConfig(BaseSettings):
    """Alke Wallet configuration"""

    model_config = SettingsConfigDict(
        env_prefix="ALKE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    # Exchange rates
    usd_to_clp_rate: str = "900"  # Decimal as string

    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"  # json or text

    # API configuration
    api_host: str = "0.0.0.0"
    api_port: int = 8090

    @property
    def usd_to_clp(self) -> Decimal:
        return Decimal(self.usd_to_clp_rate)


# Global configuration instance
config = WalletConfig()


def get_config() -> WalletConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> WalletConfig:
    """Reload configuration from environment"""
    global config
    config = WalletConfig()
    return config
