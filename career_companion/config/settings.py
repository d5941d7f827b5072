"""
Configuration management for the Career Companion job tracker.

This module handles loading environment variables, Gemini API settings,
and application settings with secure API key management.
"""

import os
from typing import Dict, Any, Optional, List
from pathlib import Path
from dotenv import load_dotenv
from dataclasses import dataclass, asdict

from ..utils import get_logger

logger = get_logger("config")

DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"
DEFAULT_GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"

@dataclass
class GeminiConfig:
    """Configuration for the Gemini generative AI backend."""
    api_key: Optional[str] = None
    model: str = DEFAULT_GEMINI_MODEL
    base_url: str = DEFAULT_GEMINI_BASE_URL
    temperature: float = 0.7
    chat_thinking_budget: int = 0
    timeout_seconds: float = 60.0

@dataclass
class AppConfig:
    """Main application configuration."""
    log_level: str = "INFO"
    log_to_file: bool = True
    data_dir: str = "data"
    store_path: str = "data/career_companion.db"

    gemini: GeminiConfig = None

    def __post_init__(self):
        if self.gemini is None:
            self.gemini = GeminiConfig()

class ConfigManager:
    """Manages application configuration from environment variables."""

    def __init__(self, env_file: Optional[str] = None):
        """Initialize configuration manager."""
        self.env_file = env_file or ".env"
        self.config = AppConfig()
        self.load_config()

    def load_config(self) -> None:
        """Load configuration from environment variables."""
        if Path(self.env_file).exists():
            load_dotenv(self.env_file)
            logger.info(f"Loaded environment from {self.env_file}")

        # Gemini Configuration
        self.config.gemini.api_key = os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY")
        self.config.gemini.model = os.getenv("GEMINI_MODEL", DEFAULT_GEMINI_MODEL)
        self.config.gemini.base_url = os.getenv("GEMINI_BASE_URL", DEFAULT_GEMINI_BASE_URL)
        self.config.gemini.temperature = float(os.getenv("GEMINI_TEMPERATURE", "0.7"))
        self.config.gemini.chat_thinking_budget = int(os.getenv("GEMINI_THINKING_BUDGET", "0"))
        self.config.gemini.timeout_seconds = float(os.getenv("GEMINI_TIMEOUT_SECONDS", "60"))

        # App Configuration
        self.config.log_level = os.getenv("LOG_LEVEL", "INFO")
        self.config.log_to_file = os.getenv("LOG_TO_FILE", "true").lower() == "true"
        self.config.data_dir = os.getenv("DATA_DIR", "data")
        self.config.store_path = os.getenv(
            "STORE_PATH", str(Path(self.config.data_dir) / "career_companion.db")
        )

        logger.info("Configuration loaded successfully")

    def ensure_directories(self) -> None:
        """Ensure required directories exist."""
        directories = [
            self.config.data_dir,
            f"{self.config.data_dir}/logs",
            str(Path(self.config.store_path).parent),
        ]

        for directory in directories:
            Path(directory).mkdir(parents=True, exist_ok=True)

    def get_gemini_config(self) -> GeminiConfig:
        """Get Gemini configuration."""
        return self.config.gemini

    def get_app_config(self) -> AppConfig:
        """Get full application configuration."""
        return self.config

    def validate_config(self) -> Dict[str, List[str]]:
        """Validate configuration and return any issues."""
        issues = {
            "errors": [],
            "warnings": []
        }

        if not self.config.gemini.api_key:
            issues["errors"].append("No Gemini API key configured. Set GEMINI_API_KEY in .env")

        if not 0.0 <= self.config.gemini.temperature <= 2.0:
            issues["warnings"].append(
                f"GEMINI_TEMPERATURE={self.config.gemini.temperature} is outside the usual 0.0-2.0 range"
            )

        if self.config.gemini.chat_thinking_budget < 0:
            issues["warnings"].append("GEMINI_THINKING_BUDGET is negative - thinking config will be omitted")

        if self.config.log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            issues["warnings"].append(f"Unknown LOG_LEVEL '{self.config.log_level}' - falling back to INFO")

        return issues

    def mask_sensitive_config(self) -> Dict[str, Any]:
        """Get configuration with sensitive values masked for display."""
        config_dict = asdict(self.config)

        sensitive_keys = ["api_key"]

        def mask_value(obj):
            if isinstance(obj, dict):
                for key, value in obj.items():
                    if key in sensitive_keys and value:
                        obj[key] = f"{value[:8]}..." if len(value) > 8 else "***"
                    elif isinstance(value, dict):
                        mask_value(value)
            return obj

        return mask_value(config_dict)

    def update_config(self, **kwargs) -> None:
        """Update configuration values dynamically."""
        for key, value in kwargs.items():
            if hasattr(self.config, key):
                setattr(self.config, key, value)
            else:
                # Handle nested config updates
                parts = key.split('.')
                if len(parts) == 2:
                    section, setting = parts
                    if hasattr(self.config, section):
                        section_obj = getattr(self.config, section)
                        if hasattr(section_obj, setting):
                            setattr(section_obj, setting, value)

        logger.info(f"Configuration updated: {list(kwargs.keys())}")

# Global configuration instance
config_manager = ConfigManager()

def get_config() -> AppConfig:
    """Get the global configuration instance."""
    return config_manager.get_app_config()

def get_gemini_config() -> GeminiConfig:
    """Get Gemini configuration."""
    return config_manager.get_gemini_config()

def validate_config() -> Dict[str, List[str]]:
    """Validate current configuration."""
    return config_manager.validate_config()
