"""Model name component."""

from typing import Optional

from ...config.schema import ComponentConfig
from ...types import StatusData
from ..base import Component
from ..registry import register_component


@register_component(
    "model",
    display_name="Model",
    description="Claude model name (e.g., Claude Sonnet 4)",
)
class ModelComponent(Component):
    """Display Claude model name."""

    def render(self, config: ComponentConfig, data: StatusData) -> Optional[str]:
        return data.model_name or None
