"""Git branch component."""

from typing import Optional

from ...config.schema import ComponentConfig
from ...types import StatusData
from ..base import Component
from ..registry import register_component


@register_component(
    "branch",
    display_name="Branch",
    description="Current git branch, prefixed by the active repo in multi-repo mode",
)
class BranchComponent(Component):
    """Display current git branch name."""

    def render(self, config: ComponentConfig, data: StatusData) -> Optional[str]:
        return data.branch or None
