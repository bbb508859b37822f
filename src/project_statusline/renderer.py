"""Line composition for the status line."""

from typing import Optional

from .components import builtin  # noqa: F401
from .components.registry import get_component
from .config.schema import ComponentConfig, StatusLineConfig
from .types import StatusData


def format_component(config: ComponentConfig, value: str) -> str:
    """Format a component value with its label and suffix.

    Args:
        config: Component configuration
        value: Resolved component value

    Returns:
        "label value suffix" with the label (and its space) omitted when empty
    """
    if config.label:
        return f"{config.label} {value}{config.suffix}"
    return f"{value}{config.suffix}"


def render_component(
    component_id: str, config: ComponentConfig, data: StatusData
) -> Optional[str]:
    """Render a single component, or None if hidden, unknown or empty."""
    if not config.show:
        return None

    component = get_component(component_id)
    if not component:
        return None

    value = component.render(config, data)
    if not value:
        return None

    return format_component(config, value)


def _join(
    items: list[tuple[str, ComponentConfig]], data: StatusData, separator: str
) -> str:
    rendered = [render_component(component_id, cfg, data) for component_id, cfg in items]
    return separator.join(part for part in rendered if part)


def compose_lines(config: StatusLineConfig, data: StatusData) -> tuple[str, str]:
    """Compose the status line output.

    Line 1 holds the shown components ordered by position; line 2 holds the
    components positioned on "line2" (the model, by default). In one-line
    layout line 2 is folded onto line 1 with the same separator.

    Args:
        config: Effective configuration
        data: Resolved status values

    Returns:
        (line1, line2); line2 is empty in one-line layout or when nothing is shown
    """
    first_line_items = sorted(
        (
            (component_id, cfg)
            for component_id, cfg in config.components.items()
            if not cfg.on_second_line
        ),
        key=lambda item: item[1].sort_key,
    )
    # Everything positioned "line2" goes on line 2; shipped configs put only the model there
    second_line_items = [
        (component_id, cfg)
        for component_id, cfg in config.components.items()
        if cfg.on_second_line
    ]

    line1 = _join(first_line_items, data, config.separator)
    line2 = _join(second_line_items, data, config.separator)

    if config.layout == "one-line":
        if line2:
            line1 = config.separator.join(part for part in (line1, line2) if part)
        return line1, ""

    return line1, line2
