"""Component registry for the closed set of status line components."""

from typing import Callable, Optional

from .base import Component

# Global registry of component id -> component instance
_COMPONENT_REGISTRY: dict[str, Component] = {}


def register_component(
    component_id: str,
    display_name: str = "",
    description: str = "",
    aliases: tuple[str, ...] = (),
) -> Callable[[type[Component]], type[Component]]:
    """Decorator to register component classes with metadata.

    Usage:
        @register_component("branch", display_name="Branch",
                            description="Current git branch")
        class BranchComponent(Component):
            def render(self, config, data):
                ...

    Args:
        component_id: Config key identifying the component (e.g., "project")
        display_name: Human-readable name (defaults to formatted id)
        description: Description of what the component displays
        aliases: Additional config keys resolving to the same component
    """

    def decorator(cls: type[Component]) -> type[Component]:
        cls.display_name = display_name or component_id.replace("-", " ").title()
        cls.description = description

        instance = cls()
        for key in (component_id, *aliases):
            _COMPONENT_REGISTRY[key] = instance
        return cls

    return decorator


def get_component(component_id: str) -> Optional[Component]:
    """Get component instance by id.

    Returns:
        Component instance or None if the id is not recognised
    """
    return _COMPONENT_REGISTRY.get(component_id)


def get_all_components() -> dict[str, Component]:
    """Get all registered components, aliases included."""
    return dict(_COMPONENT_REGISTRY)
