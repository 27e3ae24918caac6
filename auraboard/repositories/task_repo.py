from sqlalchemy.ext.asyncio import AsyncSession
from auraboard.models.task import Task
from auraboard.repositories.base import BaseRepository


class TaskRepository(BaseRepository[Task]):
    def __init__(self):
        super().__init__(Task)

    async def list_for_user(self, db: AsyncSession, user_id: str) -> list[Task]:
        return await self.list(
            db,
            where={"user_id": user_id},
            order_by=(Task.created_at.desc(), Task.id.desc()),
        )

    async def get_owned(self, db: AsyncSession, task_id: str, user_id: str) -> Task | None:
        task = await self.get(db, task_id)
        if task is None or task.user_id != user_id:
            return None
        return task
