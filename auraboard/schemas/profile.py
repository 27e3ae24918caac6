from typing import Dict

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ProfileOut(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    email: str
    name: str = ""
    total_tasks: int = 0
    completed_tasks: int = 0
    completion_rate: int = 0
    categories: Dict[str, int] = {}
