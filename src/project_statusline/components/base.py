"""Base component interface for status line segments."""

from abc import ABC, abstractmethod
from typing import Optional

from ..config.schema import ComponentConfig
from ..types import StatusData


class Component(ABC):
    """Base component interface - all components must implement this.

    Component metadata (display_name, description) is set by the
    @register_component decorator rather than requiring implementation of methods.
    """

    # Class attributes set by @register_component decorator
    display_name: str = ""
    description: str = ""

    @abstractmethod
    def render(self, config: ComponentConfig, data: StatusData) -> Optional[str]:
        """Resolve the component's raw value.

        Args:
            config: Component configuration
            data: Resolved status values

        Returns:
            Value string or None to hide the component
        """
        pass
