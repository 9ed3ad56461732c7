"""
Configuration settings for the safe outputs compiler
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Compiler settings with validation"""

    model_config = SettingsConfigDict(
        env_prefix="SAFE_OUTPUTS_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    environment: str = "production"
    log_level: str = "INFO"

    # Dispatch workflow discovery (repository-relative)
    workflows_dir: str = ".github/workflows"

    # Tool catalog output
    tools_json_indent: int = 2


# Initialize settings (lazy loading)
settings = None


def get_settings() -> Settings:
    """Get or create settings instance"""
    global settings
    if settings is None:
        settings = Settings()
    return settings
