from fastapi import APIRouter, Depends

from auraboard.auth import get_current_user
from auraboard.schemas.reflection import ReflectionOut, ReflectionRequest
from auraboard.schemas.session import SessionUser
from auraboard.services.reflection_service import generate_reflection

router = APIRouter()


@router.post("", response_model=ReflectionOut)
async def create_reflection(body: ReflectionRequest, user: SessionUser = Depends(get_current_user)):
    return ReflectionOut(reflection=generate_reflection(body.mood))
