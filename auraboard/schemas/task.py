from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# Offered by the dashboard; the API itself accepts any label.
CATEGORIES = ("Personal", "Work", "Health", "Study")
UNCATEGORIZED = "Uncategorized"


class TaskCreate(BaseModel):
    # Optional here so an absent field gets our own "Missing text" error.
    text: Optional[str] = None
    category: Optional[str] = None


class TaskUpdate(BaseModel):
    id: str
    completed: bool


class TaskDelete(BaseModel):
    id: str


class TaskOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    id: str
    text: str
    completed: bool
    category: Optional[str] = None
    created_at: datetime
    user_id: str


class DeleteResult(BaseModel):
    success: bool = True
