from pathlib import Path
from typing import TYPE_CHECKING

from jinja2 import Environment, FileSystemLoader, select_autoescape

from app.schemas.todo import TodoOut

if TYPE_CHECKING:
    from app.ui.fetch import FetchState

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

env = Environment(
    loader=FileSystemLoader(TEMPLATES_DIR),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_list_item(todo: TodoOut) -> str:
    return env.get_template("list_item.html").render(todo=todo)


def render_list(state: "FetchState") -> str:
    """Loading, error or list view for ``state``."""
    return env.get_template("list.html").render(state=state)
