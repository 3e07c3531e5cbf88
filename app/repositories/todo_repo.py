from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from app.models.todo import Todo
from app.schemas.todo import TodoCreate

class TodoRepository:
    async def create(self, db: AsyncSession, todo_in: TodoCreate) -> Todo:
        todo = Todo(**todo_in.model_dump())
        db.add(todo)
        await db.commit()
        await db.refresh(todo)
        return todo

    async def list(self, db: AsyncSession):
        result = await db.execute(select(Todo).order_by(Todo.id))
        return result.scalars().all()

    async def get(self, db: AsyncSession, todo_id: int):
        return await db.get(Todo, todo_id)

    async def delete(self, db: AsyncSession, todo_id: int) -> bool:
        todo = await self.get(db, todo_id)
        if not todo:
            return False
        await db.delete(todo)
        await db.commit()
        return True
