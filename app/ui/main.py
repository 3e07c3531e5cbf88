# UI process: renders the todo list fetched from the API.
#
# Usage:
#   uvicorn app.ui.main:app --port 3000

import logging

import httpx
from fastapi import Depends, FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from app.config import HTTP_TIMEOUT, LOG_FORMAT, LOG_LEVEL, TODOS_API_URL
from app.ui.components import TEMPLATES_DIR
from app.ui.fetch import TodoListView

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
logger = logging.getLogger(__name__)

app = FastAPI(title="Todo UI")
templates = Jinja2Templates(directory=TEMPLATES_DIR)


async def get_http_client():
    async with httpx.AsyncClient(timeout=HTTP_TIMEOUT) as client:
        yield client


@app.get("/", response_class=HTMLResponse)
async def todo_page(request: Request, client: httpx.AsyncClient = Depends(get_http_client)):
    view = TodoListView(client, TODOS_API_URL)
    await view.load()
    return templates.TemplateResponse(request, "page.html", {"body": view.render()})
