from pydantic import BaseModel


class SessionUser(BaseModel):
    """Identity taken from a verified session token."""

    email: str
    name: str = ""
