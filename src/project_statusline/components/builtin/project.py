"""Project name component."""

from typing import Optional

from ...config.schema import ComponentConfig
from ...types import StatusData
from ..base import Component
from ..registry import register_component


@register_component(
    "project",
    display_name="Project",
    description="Repository root or working directory name",
)
class ProjectComponent(Component):
    """Display the project name."""

    def render(self, config: ComponentConfig, data: StatusData) -> Optional[str]:
        return data.project_name or None
