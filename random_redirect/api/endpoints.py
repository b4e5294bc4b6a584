"""
FastAPI Endpoints for the Random Redirect Service

Endpoints only handle:
- Request validation (Pydantic models)
- Rate limiting
- Mapping service exceptions to HTTP responses
- Delegating to the service layer

The admin routes are registered before the catch-all redirect route so
they are matched first.
"""

from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from random_redirect.api.schemas import (
    DeleteResponse,
    RedirectListResponse,
    SettingsSubmissionRequest,
    SubmissionResponse,
)
from random_redirect.core.exceptions import (
    DatabaseError,
    InvalidKeywordError,
    KeywordNotFoundError,
)
from random_redirect.core.rate_limit import RATE_LIMITS, limiter
from random_redirect.core.setting import settings
from random_redirect.db.session import get_session
from random_redirect.services.redirect_service import RedirectService
from random_redirect.services.sanitizer import sanitize_keyword
from random_redirect.services.settings_store import SettingsStore
from random_redirect.services.submission_service import SettingsSubmissionService

router = APIRouter()


@router.get(
    "/admin/lists",
    response_model=list[RedirectListResponse],
    summary="List redirect lists",
    tags=["Admin"],
)
@limiter.limit(RATE_LIMITS["admin"])
async def list_redirect_lists(
    request: Request,
    session: AsyncSession = Depends(get_session)
) -> list[RedirectListResponse]:
    lists = await SettingsStore(session).all()
    return [RedirectListResponse.from_list(keyword, redirect_list) for keyword, redirect_list in lists.items()]


@router.get(
    "/admin/lists/{keyword:path}",
    response_model=RedirectListResponse,
    summary="Get one redirect list",
    tags=["Admin"],
)
@limiter.limit(RATE_LIMITS["admin"])
async def get_redirect_list(
    keyword: str,
    request: Request,
    session: AsyncSession = Depends(get_session)
) -> RedirectListResponse:
    """
    Raises:
        HTTPException 400: If keyword is malformed
        HTTPException 404: If no list is stored under keyword
    """
    try:
        keyword = sanitize_keyword(keyword)
    except InvalidKeywordError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    redirect_list = await SettingsStore(session).get(keyword)
    if redirect_list is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(KeywordNotFoundError(keyword))
        )
    return RedirectListResponse.from_list(keyword, redirect_list)


@router.post(
    "/admin/lists",
    response_model=SubmissionResponse,
    summary="Save redirect lists",
    description="Sanitizes and saves edited lists plus an optional new list. "
                "Invalid lists are skipped and reported in 'errors'.",
    tags=["Admin"],
)
@limiter.limit(RATE_LIMITS["admin"])
async def submit_redirect_lists(
    request: Request,
    body: SettingsSubmissionRequest,
    session: AsyncSession = Depends(get_session)
) -> SubmissionResponse:
    try:
        submission_service = SettingsSubmissionService(session)
        result = await submission_service.process(body.lists, new_list=body.new_list)
    except DatabaseError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )
    return SubmissionResponse(**asdict(result))


@router.delete(
    "/admin/lists/{keyword:path}",
    response_model=DeleteResponse,
    summary="Delete a redirect list",
    description="Removes the list; the keyword's shortlink is left in place.",
    tags=["Admin"],
)
@limiter.limit(RATE_LIMITS["admin"])
async def delete_redirect_list(
    keyword: str,
    request: Request,
    session: AsyncSession = Depends(get_session)
) -> DeleteResponse:
    """
    Raises:
        HTTPException 400: If keyword is malformed
        HTTPException 404: If no list is stored under keyword
    """
    try:
        deleted_keyword = await SettingsSubmissionService(session).delete_list(keyword)
    except InvalidKeywordError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except KeywordNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except DatabaseError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    return DeleteResponse(keyword=deleted_keyword)


@router.get(
    "/{keyword:path}",
    summary="Redirect a keyword",
    description="Redirects to one of the keyword's URLs chosen by weight, "
                "or to its plain shortlink when no enabled list exists",
    tags=["Redirect"],
)
@limiter.limit(RATE_LIMITS["redirect"])
async def redirect_keyword(
    keyword: str,
    request: Request,
    session: AsyncSession = Depends(get_session)
) -> RedirectResponse:
    """
    Returns:
        RedirectResponse (HTTP 307) to a weighted pick, or (HTTP 302) to
        the shortlink target

    Raises:
        HTTPException 404: If neither an enabled list nor a shortlink exists
        HTTPException 429: If rate limit exceeded
    """
    redirect_service = RedirectService(session)

    url = await redirect_service.get_redirect_url(keyword)
    if url:
        return RedirectResponse(url=url, status_code=settings.REDIRECT_STATUS_CODE)

    url = await redirect_service.get_shortlink_url(keyword)
    if url:
        return RedirectResponse(url=url, status_code=settings.SHORTLINK_STATUS_CODE)

    raise HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Keyword '{keyword}' not found"
    )
