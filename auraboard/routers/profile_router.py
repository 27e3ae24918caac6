from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from auraboard.auth import get_current_user
from auraboard.schemas.profile import ProfileOut
from auraboard.schemas.session import SessionUser
from auraboard.services.task_service import TaskService
from auraboard.database import get_db

router = APIRouter()
service = TaskService()


@router.get("", response_model=ProfileOut)
async def read_profile(user: SessionUser = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    return await service.profile(db, user)
