from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from auraboard.auth import get_current_user
from auraboard.schemas.session import SessionUser
from auraboard.schemas.task import DeleteResult, TaskCreate, TaskDelete, TaskOut, TaskUpdate
from auraboard.services.task_service import TaskService
from auraboard.database import get_db

router = APIRouter()
service = TaskService()


@router.get("", response_model=list[TaskOut])
async def list_tasks(user: SessionUser = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    return await service.list_tasks(db, user)


@router.post("", response_model=TaskOut)
async def create_task(
    task_in: TaskCreate,
    user: SessionUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await service.create_task(db, user, task_in)


@router.patch("", response_model=TaskOut)
async def update_task(
    task_in: TaskUpdate,
    user: SessionUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await service.set_completed(db, user, task_in.id, task_in.completed)


@router.delete("", response_model=DeleteResult)
async def delete_task(
    task_in: TaskDelete,
    user: SessionUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    await service.delete_task(db, user, task_in.id)
    return DeleteResult(success=True)
