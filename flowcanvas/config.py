"""Application configuration using Pydantic Settings."""
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LayoutOptions(BaseModel):
    """Spacing constants for the layered layout."""

    model_config = ConfigDict(frozen=True)

    node_spacing: float = Field(280, gt=0, description="Horizontal gap between siblings")
    layer_spacing: float = Field(180, gt=0, description="Vertical gap between layers")
    base_y: float = Field(100, description="Y coordinate of layer 0")
    center_x: float = Field(500, description="Horizontal anchor layers are centered on")
    min_x: float = Field(150, description="Left-most x any layer may start at")
    fallback_columns: int = Field(3, ge=1, description="Columns of the fallback grid")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="FLOWCANVAS_",
        case_sensitive=False,
        extra="ignore",
    )

    # App settings
    app_name: str = "Flowcanvas Layout Engine"
    debug: bool = False
    log_level: str = "INFO"
    log_json: bool = True

    # Layout
    node_spacing: float = 280
    layer_spacing: float = 180
    base_y: float = 100
    center_x: float = 500
    min_x: float = 150
    fallback_columns: int = 3

    # Reconciliation: rows closer than this are read left to right
    row_bucket_size: float = 50

    def layout_options(self) -> LayoutOptions:
        """Build the layout constants from these settings."""
        return LayoutOptions(
            node_spacing=self.node_spacing,
            layer_spacing=self.layer_spacing,
            base_y=self.base_y,
            center_x=self.center_x,
            min_x=self.min_x,
            fallback_columns=self.fallback_columns,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
