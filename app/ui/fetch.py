"""Fetch side of the todo list view.

A list view starts out loading, performs exactly one read of the todos
endpoint and settles into either a success state holding the records or an
error state holding a message for the user.
"""

import enum
import logging
from dataclasses import dataclass, field

import httpx
from pydantic import TypeAdapter

from app.schemas.todo import TodoOut
from app.ui.components import render_list

logger = logging.getLogger(__name__)

ERROR_MESSAGE = "Something went wrong while loading your todos."

_todo_list = TypeAdapter(list[TodoOut])


class FetchStatus(str, enum.Enum):
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class FetchState:
    status: FetchStatus = FetchStatus.LOADING
    todos: list[TodoOut] = field(default_factory=list)
    error: str | None = None

    @classmethod
    def success(cls, todos: list[TodoOut]) -> "FetchState":
        return cls(status=FetchStatus.SUCCESS, todos=list(todos))

    @classmethod
    def failure(cls, message: str = ERROR_MESSAGE) -> "FetchState":
        return cls(status=FetchStatus.ERROR, error=message)


async def fetch_todos(client: httpx.AsyncClient, url: str) -> list[TodoOut]:
    """GET the todos collection at ``url``.

    Raises ``httpx.HTTPStatusError`` on a non-2xx response, any other
    ``httpx.HTTPError`` on transport failure and ``ValueError`` when the
    body is not a JSON array of todo records.
    """
    response = await client.get(url)
    response.raise_for_status()
    return _todo_list.validate_python(response.json())


class TodoListView:
    """One fetch-and-render cycle for the todo list."""

    def __init__(self, client: httpx.AsyncClient, url: str):
        self.client = client
        self.url = url
        self.state = FetchState()

    async def load(self) -> FetchState:
        try:
            todos = await fetch_todos(self.client, self.url)
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Failed to fetch todos from %s: %s", self.url, exc)
            self.state = FetchState.failure()
        else:
            self.state = FetchState.success(todos)
        return self.state

    def render(self) -> str:
        return render_list(self.state)
