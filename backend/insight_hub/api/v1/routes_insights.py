"""RESTful endpoints for managing engineering insights."""

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse

from insight_hub.api.dependencies import get_insight_repository
from insight_hub.core.insight_repository import (
    NOT_FOUND_MESSAGE,
    ErrorKind,
    InsightRepository,
    RepositoryResult,
)

router = APIRouter(prefix="/insights", tags=["insights"])


def _failure(result: RepositoryResult) -> JSONResponse:
    if result.error_kind == ErrorKind.not_found:
        status_code = status.HTTP_404_NOT_FOUND
    else:
        status_code = status.HTTP_400_BAD_REQUEST
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "errors": result.errors},
    )


def _listing(insights: list) -> Dict[str, Any]:
    return {"success": True, "insights": insights, "count": len(insights)}


@router.get("")
def list_insights(
    repository: InsightRepository = Depends(get_insight_repository),
) -> Dict[str, Any]:
    """Return every insight in insertion order."""

    return _listing(repository.get_all())


@router.get("/search/{query}")
def search_insights(
    query: str, repository: InsightRepository = Depends(get_insight_repository)
) -> Dict[str, Any]:
    """Case-insensitive substring search across all insight fields."""

    return _listing(repository.search(query))


@router.get("/tag/{tag}")
def insights_by_tag(
    tag: str, repository: InsightRepository = Depends(get_insight_repository)
) -> Dict[str, Any]:
    return _listing(repository.get_by_tag(tag))


@router.get("/{insight_id}")
def get_insight(insight_id: str, repository: InsightRepository = Depends(get_insight_repository)):
    insight = repository.get_by_id(insight_id)
    if insight is None:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"success": False, "error": NOT_FOUND_MESSAGE},
        )
    return {"success": True, "insight": insight}


@router.post("", status_code=status.HTTP_201_CREATED)
def create_insight(
    payload: Dict[str, Any] = Body(...),
    repository: InsightRepository = Depends(get_insight_repository),
):
    """Validate and store a new insight."""

    result = repository.create(payload)
    if not result.success:
        return _failure(result)
    return {"success": True, "insight": result.insight}


@router.put("/{insight_id}")
def update_insight(
    insight_id: str,
    payload: Dict[str, Any] = Body(...),
    repository: InsightRepository = Depends(get_insight_repository),
):
    """Replace an insight; its id and timestamp are always preserved."""

    result = repository.update(insight_id, payload)
    if not result.success:
        return _failure(result)
    return {"success": True, "insight": result.insight}


@router.delete("/{insight_id}")
def delete_insight(insight_id: str, repository: InsightRepository = Depends(get_insight_repository)):
    result = repository.delete(insight_id)
    if not result.success:
        return _failure(result)
    return {"success": True}
