from enum import Enum
from typing import Optional

from rich.console import RenderableType
from rich.panel import Panel


class UIStyle(str, Enum):
    BLUE = "blue"
    CYAN = "cyan"
    YELLOW = "yellow"
    RED = "red"
    DIM = "dim"


def section(
    title: str,
    body: RenderableType,
    style: UIStyle = UIStyle.BLUE,
    subtitle: Optional[str] = None,
) -> Panel:
    return Panel(body, title=title, subtitle=subtitle, border_style=style.value, padding=(0, 1))


def bullet_note(title: str, items: list[str], style: UIStyle) -> Panel:
    return section(title, "\n".join(f"- {item}" for item in items), style=style)
