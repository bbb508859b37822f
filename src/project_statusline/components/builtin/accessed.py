"""Recently modified file component."""

from typing import Optional

from ...config.schema import ComponentConfig
from ...types import StatusData
from ..base import Component
from ..registry import register_component


@register_component(
    "accessed",
    display_name="Accessed",
    description="Most recently modified file under the project root",
    aliases=("modified",),
)
class AccessedFileComponent(Component):
    """Display the most recently modified file as a shortened relative path."""

    def render(self, config: ComponentConfig, data: StatusData) -> Optional[str]:
        return data.accessed_file or None
