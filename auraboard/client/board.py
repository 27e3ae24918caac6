import logging

import httpx

from auraboard.client.state import LOADING_REFLECTION, BoardState
from auraboard.schemas.profile import ProfileOut
from auraboard.schemas.task import TaskOut

logger = logging.getLogger(__name__)


class SignInRequired(Exception):
    """Raised for any board action attempted without a session token."""


class AuraBoardClient:
    """
    Async dashboard client. Sends one request per action and updates `state`
    only when the server answered with a success status; anything else is
    logged and ignored, leaving the previous state on screen.
    """

    def __init__(self, http: httpx.AsyncClient, token: str | None = None, state: BoardState | None = None):
        self.http = http
        self.token = token
        self.state = state or BoardState()

    @property
    def authenticated(self) -> bool:
        return bool(self.token)

    def sign_in(self, token: str) -> None:
        self.token = token

    def sign_out(self) -> None:
        self.token = None
        self.state = BoardState()

    async def _send(self, method: str, path: str, payload: dict | None = None) -> httpx.Response | None:
        if not self.authenticated:
            raise SignInRequired(f"{method} {path}")
        res = await self.http.request(
            method,
            path,
            json=payload,
            headers={"Authorization": f"Bearer {self.token}"},
        )
        if res.is_error:
            logger.warning("%s %s -> %d %s", method, path, res.status_code, res.text)
            return None
        return res

    async def load_tasks(self) -> list[TaskOut]:
        res = await self._send("GET", "/tasks")
        if res is not None:
            self.state.replace_tasks([TaskOut.model_validate(t) for t in res.json()])
        return self.state.tasks

    async def fetch_reflection(self) -> str:
        previous = self.state.reflection
        self.state.reflection = LOADING_REFLECTION
        try:
            res = await self._send("POST", "/reflection", {"mood": self.state.mood})
        finally:
            self.state.reflection = previous
        if res is not None:
            self.state.reflection = res.json()["reflection"]
        return self.state.reflection

    async def set_mood(self, mood: str) -> str:
        self.state.mood = mood
        return await self.fetch_reflection()

    async def refresh_reflection(self) -> str:
        self.state.refresh_key += 1
        return await self.fetch_reflection()

    async def add_task(self, text: str, category: str | None = None) -> TaskOut | None:
        if not text.strip():
            return None
        res = await self._send("POST", "/tasks", {"text": text, "category": category or self.state.category})
        if res is None:
            return None
        task = TaskOut.model_validate(res.json())
        self.state.task_created(task)
        return task

    async def toggle_task(self, task: TaskOut) -> TaskOut | None:
        res = await self._send("PATCH", "/tasks", {"id": task.id, "completed": not task.completed})
        if res is None:
            return None
        updated = TaskOut.model_validate(res.json())
        self.state.task_updated(updated)
        return updated

    async def delete_task(self, task: TaskOut) -> bool:
        res = await self._send("DELETE", "/tasks", {"id": task.id})
        if res is None:
            return False
        self.state.task_deleted(task.id)
        return True

    async def profile(self) -> ProfileOut | None:
        res = await self._send("GET", "/profile")
        if res is None:
            return None
        return ProfileOut.model_validate(res.json())
