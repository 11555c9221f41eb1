"""Analysis API: latest burnout assessment, sleep/stress trends, regenerate from the most recent log."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from lifepattern.api.deps import get_current_user
from lifepattern.config import settings
from lifepattern.db.session import get_db
from lifepattern.models.user import User
from lifepattern.schemas.analysis import AnalysisResponse, TrendPointResponse
from lifepattern.services import analysis
from lifepattern.services.errors import InvalidRangeSpecification, NoDataAvailable

router = APIRouter(prefix="/analysis", tags=["analysis"])


@router.get(
    "/latest",
    response_model=AnalysisResponse,
    summary="Latest burnout assessment",
    responses={401: {"description": "Not authenticated"}, 404: {"description": "No analysis yet"}},
)
async def get_latest_analysis(
    session: Annotated[AsyncSession, Depends(get_db)],
    user: Annotated[User, Depends(get_current_user)],
) -> AnalysisResponse:
    try:
        assessment = await analysis.get_latest_analysis(session, user.id)
    except NoDataAvailable as e:
        raise HTTPException(status_code=404, detail=e.message) from e
    return AnalysisResponse.from_assessment(assessment)


@router.get(
    "/trends",
    response_model=list[TrendPointResponse],
    summary="Sleep and stress trend for charts",
    responses={
        400: {"description": "Neither days nor start+end given"},
        401: {"description": "Not authenticated"},
    },
)
async def get_trends(
    session: Annotated[AsyncSession, Depends(get_db)],
    user: Annotated[User, Depends(get_current_user)],
    days: int | None = Query(default=None, le=settings.trend_days_max),
    start: date | None = None,
    end: date | None = None,
) -> list[TrendPointResponse]:
    """Either ?days=N (last N days including today) or ?start=YYYY-MM-DD&end=YYYY-MM-DD."""
    try:
        _, points = await analysis.get_trends(session, user.id, days, start, end)
    except InvalidRangeSpecification as e:
        raise HTTPException(status_code=400, detail=e.message) from e
    return [TrendPointResponse.from_point(p) for p in points]


@router.post(
    "/regenerate",
    response_model=AnalysisResponse,
    summary="Compute a new assessment from the most recent daily log",
    responses={400: {"description": "No daily logs"}, 401: {"description": "Not authenticated"}},
)
async def regenerate_analysis(
    session: Annotated[AsyncSession, Depends(get_db)],
    user: Annotated[User, Depends(get_current_user)],
) -> AnalysisResponse:
    try:
        assessment = await analysis.regenerate_analysis(session, user.id)
    except NoDataAvailable as e:
        raise HTTPException(status_code=400, detail=e.message) from e
    await session.commit()
    return AnalysisResponse.from_assessment(assessment)
