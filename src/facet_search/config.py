"""Centralized configuration for facet-search using Pydantic Settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Strictly typed engine configuration loaded from ``FACET_SEARCH_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FACET_SEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    # Indexing
    default_index: str = Field(
        default="default", min_length=1, description="Index assigned to documents submitted without one"
    )
    migrate_index_on_reindex: bool = Field(
        default=False,
        description=(
            "Remove a document from its previous index when it is re-indexed under a different index. "
            "Disabled by default to keep the stale-entry behaviour existing callers rely on"
        ),
    )

    # Query execution
    default_page_size: int = Field(default=10, ge=1, description="Page size used when a query asks for size <= 0")
    highlight_tag: str = Field(
        default="mark",
        pattern=r"^[A-Za-z][A-Za-z0-9-]*$",
        description="Markup element wrapped around highlighted query words",
    )

    # Observability
    log_level: str = Field(default="info", description="Logging level")
    log_json: bool = Field(default=True, description="Emit structured JSON logs")
    tracing_enabled: bool = Field(default=True, description="Wrap searches in OpenTelemetry spans")
