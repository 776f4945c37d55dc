# src/config/settings.py
# This file provides centralized configuration management for the service
# All settings live in one place and are read from environment variables,
# with defaults that match the fixed deployment (listen on 0.0.0.0:8080)

import os
from dataclasses import dataclass, field

# Accepted values for the validated settings
VALID_ENVIRONMENTS = ["development", "staging", "production"]
VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass
class AppConfig:
    """
    Application-level configuration.

    Settings that affect how the greeting service runs: where it listens,
    how loudly it logs and whether Flask debug mode is on.
    """
    # Environment: development, staging, production
    environment: str = field(default_factory=lambda: os.getenv("ENVIRONMENT", "development"))

    # Log level: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())

    # Host and port where the HTTP server will listen
    # 0.0.0.0 means listen on all interfaces
    api_host: str = field(default_factory=lambda: os.getenv("API_HOST", "0.0.0.0"))
    api_port: int = field(default_factory=lambda: int(os.getenv("API_PORT", "8080")))

    # Debug mode - should be False in production
    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")


@dataclass
class Settings:
    """
    Main settings class that holds all configuration.

    Other modules import the module-level instance and read values like
    settings.app.api_port.
    """
    app: AppConfig = field(default_factory=AppConfig)

    def validate(self):
        """
        Validate configuration values.

        Raises:
            ValueError: If a setting is missing or out of range
        """
        if not self.app.api_host:
            raise ValueError("API_HOST is required")
        if not (1 <= self.app.api_port <= 65535):
            raise ValueError(f"API_PORT must be between 1 and 65535, got {self.app.api_port}")

        if self.app.environment not in VALID_ENVIRONMENTS:
            raise ValueError(
                f"ENVIRONMENT must be development, staging, or production, got {self.app.environment}"
            )

        if self.app.log_level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be DEBUG, INFO, WARNING, ERROR, or CRITICAL, got {self.app.log_level}"
            )


def load_settings() -> Settings:
    """
    Build a fresh Settings object from the current environment and validate it.

    Returns:
        Validated Settings instance

    Raises:
        RuntimeError: If any value fails validation
    """
    try:
        loaded = Settings()
        loaded.validate()
    except ValueError as e:
        # Configuration errors are fatal - fail before the server starts
        raise RuntimeError(f"Invalid configuration: {e}") from e
    return loaded


# Global settings instance shared by every module
# Validated on import so configuration errors surface immediately
settings = load_settings()
