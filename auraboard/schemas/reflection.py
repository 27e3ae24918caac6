from pydantic import BaseModel


class ReflectionRequest(BaseModel):
    mood: str = ""


class ReflectionOut(BaseModel):
    reflection: str
