"""Configuration management for the GradeIdea scoring service."""

from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file (only if accessible)
try:
    load_dotenv()
except (PermissionError, OSError):
    # In sandboxed environments, .env might not be accessible
    pass


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # Supabase configuration (required)
    SUPABASE_URL: str = Field(..., description="Supabase project URL")
    SUPABASE_SERVICE_ROLE_KEY: str = Field(..., description="Supabase service role key")

    # OpenAI configuration (required)
    OPENAI_API_KEY: str = Field(..., description="OpenAI API key")
    OPENAI_MODEL: str = Field(default="gpt-4o-mini", description="Default chat model")

    # Environment
    GRADEIDEA_ENV: str = Field(default="dev", description="Environment: dev, staging, prod")

    # Storage tables
    CHECKLISTS_TABLE: str = Field(default="checklists", description="Checklist documents table")
    IDEAS_TABLE: str = Field(default="ideas", description="Idea records table")

    # Action plan generation
    PLAN_MODEL: str = Field(default="gpt-4o-mini", description="Model for action plan generation")
    PLAN_TEMPERATURE: float = Field(default=0.4, description="Temperature for action plans")
    PLAN_MAX_TOKENS: int = Field(default=500, description="Completion cap for action plans")


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance

    Raises:
        ValidationError: If required environment variables are missing
    """
    return Settings()
