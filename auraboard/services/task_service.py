import logging

from sqlalchemy.ext.asyncio import AsyncSession
from auraboard.errors import TaskNotFoundError, ValidationError
from auraboard.models.task import Task
from auraboard.repositories.task_repo import TaskRepository
from auraboard.schemas.profile import ProfileOut
from auraboard.schemas.session import SessionUser
from auraboard.schemas.task import TaskCreate
from auraboard.services.stats_service import summarize
from auraboard.services.user_service import UserService

logger = logging.getLogger(__name__)


class TaskService:
    def __init__(self):
        self.repo = TaskRepository()
        self.users = UserService()

    async def list_tasks(self, db: AsyncSession, identity: SessionUser) -> list[Task]:
        user = await self.users.find(db, identity)
        if user is None:
            return []
        return await self.repo.list_for_user(db, user.id)

    async def create_task(self, db: AsyncSession, identity: SessionUser, task_in: TaskCreate) -> Task:
        if not task_in.text or not task_in.text.strip():
            raise ValidationError("Missing text")

        try:
            user = await self.users.get_or_create(db, identity)
            task = await self.repo.create(
                db,
                Task(text=task_in.text, completed=False, category=task_in.category, user_id=user.id),
            )
            await db.commit()
        except Exception:
            await db.rollback()
            raise
        await db.refresh(task)
        logger.info("user %s created task %s", user.id, task.id)
        return task

    async def set_completed(self, db: AsyncSession, identity: SessionUser, task_id: str, completed: bool) -> Task:
        task = await self._owned_task(db, identity, task_id)
        task.completed = completed
        await db.commit()
        await db.refresh(task)
        return task

    async def delete_task(self, db: AsyncSession, identity: SessionUser, task_id: str) -> None:
        await self._owned_task(db, identity, task_id)
        await self.repo.delete(db, task_id)
        await db.commit()
        logger.info("deleted task %s", task_id)

    async def profile(self, db: AsyncSession, identity: SessionUser) -> ProfileOut:
        user = await self.users.find(db, identity)
        if user is None:
            return ProfileOut(email=identity.email, name=identity.name)
        tasks = await self.repo.list_for_user(db, user.id)
        return ProfileOut(email=user.email, name=user.name, **summarize(tasks))

    async def _owned_task(self, db: AsyncSession, identity: SessionUser, task_id: str) -> Task:
        # Tasks owned by someone else are reported exactly like missing ones.
        user = await self.users.find(db, identity)
        task = None if user is None else await self.repo.get_owned(db, task_id, user.id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task
