"""Configuration schema using Pydantic for validation."""

from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, Field, PositiveInt, ValidationInfo, field_validator

from .defaults import (
    DEFAULT_COLORS,
    DEFAULT_COMPONENTS,
    DEFAULT_LAYOUT,
    DEFAULT_MAX_DEPTH,
    DEFAULT_PATH_SHORTENING,
    DEFAULT_SEPARATOR,
    LINE2,
)


class ComponentConfig(BaseModel):
    """Configuration for a single status line component."""

    show: bool = False
    label: str = ""
    suffix: str = ""
    position: Union[PositiveInt, Literal["line2"], None] = None
    color: Optional[str] = None

    model_config = {"extra": "ignore", "frozen": True}

    @field_validator("show", "label", "suffix", mode="before")
    @classmethod
    def _null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        """Treat an explicit JSON null as an unset field."""
        if value is None:
            return cls.model_fields[info.field_name].default
        return value

    @property
    def on_second_line(self) -> bool:
        return self.position == LINE2

    @property
    def sort_key(self) -> float:
        """Sort order among line-1 components; unpositioned components go last."""
        if isinstance(self.position, int):
            return self.position
        return float("inf")


class TechnicalConfig(BaseModel):
    """Filesystem search settings."""

    max_depth: PositiveInt = Field(default=DEFAULT_MAX_DEPTH, alias="maxDepth")
    path_shortening: PositiveInt = Field(
        default=DEFAULT_PATH_SHORTENING, alias="pathShortening"
    )

    model_config = {"extra": "ignore", "frozen": True, "populate_by_name": True}


def _default_components() -> dict[str, ComponentConfig]:
    return {
        component_id: ComponentConfig(**settings)
        for component_id, settings in DEFAULT_COMPONENTS.items()
    }


class StatusLineConfig(BaseModel):
    """Effective status line configuration.

    Keys missing from a config file take their defaults here; a ``components``
    mapping that is present replaces the default mapping as a whole.
    """

    preset: Optional[str] = None
    layout: Literal["one-line", "two-line"] = DEFAULT_LAYOUT
    separator: str = DEFAULT_SEPARATOR
    components: dict[str, ComponentConfig] = Field(default_factory=_default_components)
    technical: TechnicalConfig = Field(default_factory=TechnicalConfig)
    colors: dict[str, Any] = Field(default_factory=lambda: dict(DEFAULT_COLORS))

    model_config = {"extra": "ignore", "frozen": True}
