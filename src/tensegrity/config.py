"""Configuration management using Pydantic Settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Language
    default_language: str = Field(
        default="en",
        description="Language profile used until the host selects another"
    )

    # Graph construction
    edge_threshold: float = 0.55
    cjk_edge_threshold: float = Field(
        default=0.65,
        description="CJK texts produce denser candidate sets, so the bar is higher"
    )
    cjk_max_nodes: int = 40
    cjk_max_degree: int = 8
    layout_scale: float = Field(
        default=800.0,
        description="Multiplier from semantic-vector space to world pixels"
    )
    similarity_weight: float = 0.7
    proximity_weight: float = 0.1
    proximity_falloff: float = 50.0  # characters
    conceptual_bonus: float = 0.3

    # Glyph footprint approximation (world units)
    base_font_size: float = 15.0
    font_size_per_frequency: float = 2.0
    glyph_width_ratio: float = 0.6
    collision_padding: float = 20.0

    # Physics
    spring_strength: float = 0.02
    return_strength: float = 0.015
    base_damping: float = 0.88
    damping_slack: float = Field(
        default=0.07,
        description="Extra damping applied while the speed ramp is low"
    )
    float_speed: float = 0.008
    float_amplitude: float = 1.0
    pointer_influence: float = Field(
        default=0.05,
        description="Fraction of smoothed pointer velocity added to every node"
    )
    pointer_smoothing: float = 0.7
    collision_strength: float = 0.1
    boundary_strength: float = 0.04
    edge_rest_length: float = 250.0
    edge_rest_length_per_strength: float = 400.0
    drag_spring_multiplier: float = 3.0
    release_velocity_factor: float = 0.3

    # Animation durations (frames)
    birth_duration: int = 150
    collapse_duration: int = 60
    center_move_duration: int = 30
    hold_duration: int = 180
    auto_zoom_duration: int = 90

    # Viewport
    min_zoom: float = 0.1
    max_zoom: float = 5.0
    fit_margin: float = Field(
        default=0.9,
        description="Fraction of the fitted zoom actually used"
    )
    top_padding: float = 10.0
    bottom_padding: float = 50.0
    side_padding: float = 50.0
    ticker_size: float = 60.0
    ticker_size_touch: float = 100.0
    touch_breakpoint: float = 768.0
    wheel_zoom_rate: float = 0.001

    # Interaction
    click_radius: float = 100.0
    hover_radius: float = 80.0
    hover_text_margin: float = 20.0
    auto_highlight_frames: int = 60
    membrane_padding: float = 50.0

    # Liveness
    max_loading_seconds: float = Field(
        default=60.0,
        description="Watchdog ceiling for any pre-Birth waiting state"
    )
    generation_timeout: float = 30.0
    loading_timeout_text: str = "Loading timeout. Please try again.\n"
    generation_error_text: str = "Error generating text. Please try again.\n"
    connection_timeout_text: str = (
        "Connection timeout. Please check your internet connection and try again.\n"
    )

    # Determinism
    jitter_seed: int = Field(
        default=0,
        description="Seed for the snap jitter applied near the end of transitions"
    )


def get_dev_settings() -> Settings:
    """Get development environment settings."""
    return Settings(
        max_loading_seconds=120.0,
        generation_timeout=60.0,
    )


def get_test_settings() -> Settings:
    """Get test environment settings."""
    return Settings(
        default_language="en",
        jitter_seed=42,
    )


# Global settings instance
settings = Settings()
