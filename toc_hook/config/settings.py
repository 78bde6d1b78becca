from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Hook settings loaded from environment variables.

    The hook runs inside git with whatever environment the committer has, so
    there is no settings file: every value has a default and can be overridden
    by exporting the field name with the TOC_HOOK_ prefix (TOC_HOOK_TOOL,
    TOC_HOOK_MARKDOWN_SUFFIX, TOC_HOOK_DEBUG).
    """

    model_config = SettingsConfigDict(env_prefix="TOC_HOOK_")

    # Executable that rewrites a Markdown file's TOC in place
    TOOL: str = "update_markdown_toc"
    MARKDOWN_SUFFIX: str = ".md"

    # Print every status record and step to stderr
    DEBUG: bool = False


@lru_cache
def get_settings() -> Settings:
    return Settings()
