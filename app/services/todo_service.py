import logging

from sqlalchemy.ext.asyncio import AsyncSession
from app.repositories.todo_repo import TodoRepository
from app.schemas.todo import TodoCreate

logger = logging.getLogger(__name__)

class TodoService:
    def __init__(self):
        self.repo = TodoRepository()

    async def create_todo(self, db: AsyncSession, todo_in: TodoCreate):
        todo = await self.repo.create(db, todo_in)
        logger.info("Created todo %s", todo.id)
        return todo

    async def list_todos(self, db: AsyncSession):
        return await self.repo.list(db)

    async def get_todo(self, db: AsyncSession, todo_id: int):
        return await self.repo.get(db, todo_id)

    async def delete_todo(self, db: AsyncSession, todo_id: int):
        if await self.repo.delete(db, todo_id):
            logger.info("Deleted todo %s", todo_id)
