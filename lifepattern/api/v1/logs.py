"""Daily logs API: CRUD for user-entered sleep, work, study, entertainment hours, energy and stress."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from lifepattern.api.deps import get_current_user
from lifepattern.db.session import get_db
from lifepattern.models.daily_log import DailyLog
from lifepattern.models.user import User
from lifepattern.schemas.daily_log import MAX_HOURS_PER_DAY, DailyLogRequest, DailyLogResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/logs", tags=["logs"])


def _row_to_response(row: DailyLog) -> DailyLogResponse:
    return DailyLogResponse(
        id=str(row.id),
        date=row.date,
        sleep_hours=row.sleep_hours,
        work_hours=row.work_hours,
        study_hours=row.study_hours,
        entertainment_hours=row.entertainment_hours,
        energy_level=row.energy_level,
        stress_level=row.stress_level,
        notes=row.notes,
    )


def _check_total_hours(body: DailyLogRequest) -> None:
    if body.total_hours > MAX_HOURS_PER_DAY:
        raise HTTPException(status_code=400, detail="Total hours cannot exceed 24 hours per day")


async def _date_taken(session: AsyncSession, user_id: int, body: DailyLogRequest) -> bool:
    r = await session.execute(
        select(DailyLog.id).where(DailyLog.user_id == user_id, DailyLog.date == body.date)
    )
    return r.first() is not None


async def _get_own_log(session: AsyncSession, user_id: int, log_id: int) -> DailyLog:
    r = await session.execute(select(DailyLog).where(DailyLog.id == log_id, DailyLog.user_id == user_id))
    row = r.scalar_one_or_none()
    if not row:
        raise HTTPException(status_code=404, detail=f"Daily log not found with id: {log_id}")
    return row


@router.get(
    "",
    response_model=list[DailyLogResponse],
    summary="List daily logs (newest first)",
    responses={401: {"description": "Not authenticated"}},
)
async def list_logs(
    session: Annotated[AsyncSession, Depends(get_db)],
    user: Annotated[User, Depends(get_current_user)],
) -> list[DailyLogResponse]:
    r = await session.execute(
        select(DailyLog).where(DailyLog.user_id == user.id).order_by(DailyLog.date.desc())
    )
    return [_row_to_response(row) for row in r.scalars().all()]


@router.post(
    "",
    response_model=DailyLogResponse,
    status_code=201,
    summary="Create daily log",
    responses={
        400: {"description": "Total hours exceed 24 or a log already exists for this date"},
        401: {"description": "Not authenticated"},
    },
)
async def create_log(
    session: Annotated[AsyncSession, Depends(get_db)],
    user: Annotated[User, Depends(get_current_user)],
    body: DailyLogRequest,
) -> DailyLogResponse:
    _check_total_hours(body)
    if await _date_taken(session, user.id, body):
        raise HTTPException(status_code=400, detail="A log already exists for this date")
    row = DailyLog(user_id=user.id, **body.model_dump())
    session.add(row)
    await session.commit()
    await session.refresh(row)
    logger.debug("Created daily log %s for user %s on %s", row.id, user.id, row.date)
    return _row_to_response(row)


@router.get(
    "/{log_id}",
    response_model=DailyLogResponse,
    summary="Get daily log",
    responses={401: {"description": "Not authenticated"}, 404: {"description": "Daily log not found"}},
)
async def get_log(
    session: Annotated[AsyncSession, Depends(get_db)],
    user: Annotated[User, Depends(get_current_user)],
    log_id: int,
) -> DailyLogResponse:
    return _row_to_response(await _get_own_log(session, user.id, log_id))


@router.put(
    "/{log_id}",
    response_model=DailyLogResponse,
    summary="Replace daily log",
    responses={
        400: {"description": "Total hours exceed 24 or a log already exists for the new date"},
        401: {"description": "Not authenticated"},
        404: {"description": "Daily log not found"},
    },
)
async def update_log(
    session: Annotated[AsyncSession, Depends(get_db)],
    user: Annotated[User, Depends(get_current_user)],
    log_id: int,
    body: DailyLogRequest,
) -> DailyLogResponse:
    """Full replace. Moving the log to another date is refused if that date already has a log."""
    row = await _get_own_log(session, user.id, log_id)
    _check_total_hours(body)
    if row.date != body.date and await _date_taken(session, user.id, body):
        raise HTTPException(status_code=400, detail="A log already exists for this date")
    for field, value in body.model_dump().items():
        setattr(row, field, value)
    await session.commit()
    await session.refresh(row)
    return _row_to_response(row)


@router.delete(
    "/{log_id}",
    summary="Delete daily log",
    responses={401: {"description": "Not authenticated"}, 404: {"description": "Daily log not found"}},
)
async def delete_log(
    session: Annotated[AsyncSession, Depends(get_db)],
    user: Annotated[User, Depends(get_current_user)],
    log_id: int,
) -> dict:
    row = await _get_own_log(session, user.id, log_id)
    await session.delete(row)
    await session.commit()
    return {"message": "Log deleted successfully"}
