from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models.todo import Todo
from app.schemas.todo import TodoCreate, TodoOut
from app.services.todo_service import TodoService

router = APIRouter()
service = TodoService()


async def todo_or_404(todo_id: int, db: AsyncSession = Depends(get_db)) -> Todo:
    todo = await service.get_todo(db, todo_id)
    if todo is None:
        raise HTTPException(status_code=404, detail="Todo not found")
    return todo


# The collection lives at the bare prefix (/todos); the trailing-slash form
# is accepted too but kept out of the schema.
@router.get("", response_model=list[TodoOut])
@router.get("/", response_model=list[TodoOut], include_in_schema=False)
async def list_todos(db: AsyncSession = Depends(get_db)):
    """All todos, oldest first."""
    return await service.list_todos(db)


@router.post("", response_model=TodoOut, status_code=201)
@router.post("/", response_model=TodoOut, status_code=201, include_in_schema=False)
async def create_todo(todo_in: TodoCreate, db: AsyncSession = Depends(get_db)):
    return await service.create_todo(db, todo_in)


@router.get("/{todo_id}", response_model=TodoOut)
async def read_todo(todo: Todo = Depends(todo_or_404)):
    return todo


@router.delete("/{todo_id}", status_code=204, response_class=Response)
async def remove_todo(todo_id: int, db: AsyncSession = Depends(get_db)):
    await service.delete_todo(db, todo_id)
