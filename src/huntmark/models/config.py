"""Configuration models for huntmark."""

from pydantic import BaseModel, Field, ValidationError, field_validator

DEFAULT_COLORS = {
    "red": "red",
    "blue": "blue",
    "green": "green",
    "yellow": "yellow",
    "orange": "dark_orange",
    "purple": "purple",
}

DEFAULT_HANDWRITING_STYLES = {
    "default": "italic #8b5a2b",
    "scrawl": "italic #6b4f2a",
    "elegant": "italic bold #7a4b1e",
    "graffiti": "bold #b5651d",
}


class TypewriterConfig(BaseModel):
    """Configuration for the typewriter reveal."""

    delay: float = Field(
        default=0.003,
        ge=0.0,
        le=1.0,
        description="Seconds between revealed characters"
    )

    cursor: str = Field(
        default="▊",
        max_length=4,
        description="Cursor glyph shown while the reveal is running (empty to hide)"
    )

    skip_animation: bool = Field(
        default=False,
        description="Show texts fully revealed instead of animating them"
    )

    model_config = {"frozen": True}


class RenderConfig(BaseModel):
    """Configuration for terminal rendering."""

    colors: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_COLORS),
        description="Markup color name -> Rich style"
    )

    handwriting_styles: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_HANDWRITING_STYLES),
        description="Handwriting style name -> Rich style"
    )

    show_image_paths: bool = Field(
        default=True,
        description="Show image paths in image placeholders"
    )

    @field_validator("colors")
    @classmethod
    def merge_default_colors(cls, v: dict[str, str]) -> dict[str, str]:
        """Fill in the built-in colors the user did not override."""
        merged = dict(DEFAULT_COLORS)
        merged.update({name.lower(): style for name, style in v.items()})
        return merged

    @field_validator("handwriting_styles")
    @classmethod
    def merge_default_handwriting(cls, v: dict[str, str]) -> dict[str, str]:
        """Fill in handwriting styles the user did not override."""
        unknown = set(v) - set(DEFAULT_HANDWRITING_STYLES)
        if unknown:
            raise ValueError(
                f"Unknown handwriting style(s): {', '.join(sorted(unknown))}. "
                f"Expected: {', '.join(DEFAULT_HANDWRITING_STYLES)}"
            )
        return {**DEFAULT_HANDWRITING_STYLES, **v}

    model_config = {"frozen": True}


class Config(BaseModel):
    """Root configuration for huntmark."""

    typewriter: TypewriterConfig = Field(
        default_factory=TypewriterConfig, description="Typewriter settings"
    )
    render: RenderConfig = Field(default_factory=RenderConfig, description="Render settings")

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        """
        Validate configuration from a plain dict.

        Raises:
            ValueError: If the data is not a mapping or validation fails
        """
        if not isinstance(data, dict):
            raise ValueError(f"Configuration must be a mapping, got {type(data).__name__}")
        try:
            return cls(**data)
        except ValidationError as e:
            raise ValueError(f"Configuration validation failed:\n{e}") from e

    model_config = {"frozen": True}
