"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from decimal import Decimal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BankConfig(BaseSettings):
    """Banking model configuration"""
    
    # Default account limits, applied when an account is opened without explicit limits
    default_overdraft_limit: Decimal = Field(default=Decimal("800"), ge=0)
    default_debit_limit: Decimal = Field(default=Decimal("1000"), ge=0)
    
    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"  # json or text
    
    model_config = SettingsConfigDict(
        env_prefix="BANK_",
        env_file=".env",
        case_sensitive=False
    )


# Global configuration instance
config = BankConfig()


def get_config() -> BankConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> BankConfig:
    """Reload configuration from environment"""
    global config
    config = BankConfig()
    return config
