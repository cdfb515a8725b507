"""Stats resource router.

Endpoints:
    GET /api/v1/stats - Dashboard counters
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from campus_events.application.queries import GetCatalogStats
from campus_events.application.queries.handlers import GetCatalogStatsHandler
from campus_events.core.container import get_catalog_stats_handler
from campus_events.core.result import Failure, Success
from campus_events.presentation.routers.api.middleware import CurrentUser, get_trace_id
from campus_events.presentation.routers.api.v1.errors import ErrorResponseBuilder
from campus_events.schemas.stats_schemas import StatsResponse

router = APIRouter(prefix="/stats", tags=["Stats"])


@router.get("", response_model=StatsResponse, summary="Dashboard counters")
async def get_stats(
    request: Request,
    current_user: CurrentUser,
    handler: GetCatalogStatsHandler = Depends(get_catalog_stats_handler),
) -> StatsResponse | JSONResponse:
    """Dashboard counters for the caller.

    GET /api/v1/stats → 200 OK
    """
    result = await handler.handle(GetCatalogStats(actor=current_user))

    match result:
        case Success(value=stats):
            return StatsResponse.from_dto(stats)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )
