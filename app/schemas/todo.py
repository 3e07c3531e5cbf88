from pydantic import BaseModel, ConfigDict, Field

class TodoBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(min_length=1, max_length=128)
    # camelCase on the wire, snake_case in Python
    is_completed: bool = Field(default=False, alias="isCompleted")

class TodoCreate(TodoBase):
    pass

class TodoOut(TodoBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
