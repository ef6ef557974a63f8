"""
Engine settings using Pydantic.

Provides environment-based configuration loading with RELEASEORDER_ prefix.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Engine settings."""

    # Hook annotations
    hook_annotation: str = "helm.sh/hook"
    hook_weight_annotation: str = "helm.sh/hook-weight"
    hook_delete_policy_annotation: str = "helm.sh/hook-delete-policy"

    # Resource weight for ordinary manifests
    weight_annotation: str = "helm.sh/weight"

    # Keys whose last path segment starts with this are partials, never resources
    private_prefix: str = "_"

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "RELEASEORDER_"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
