"""Mission-plan task descriptor consumed by the guidance generators."""

from typing import Literal

from pydantic import BaseModel

TaskCategory = Literal[
    "admin", "healthcare", "career", "education", "housing", "finance", "wellness"
]


class TaskDescriptor(BaseModel):
    id: str = ""
    title: str
    description: str = ""
    category: TaskCategory = "admin"
    deadline: str | None = None
    priority: Literal["high", "medium", "low"] = "medium"
    completed: bool = False


class Resource(BaseModel):
    name: str
    url: str
    description: str
