from sqlalchemy import Boolean, Column, Integer, String
from app.database import Base

class Todo(Base):
    __tablename__ = "todos"
    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(128), nullable=False)
    is_completed = Column(Boolean, nullable=False, default=False)
