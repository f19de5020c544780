"""Catch-all for GET paths no other route claimed. Must be mounted last."""

from fastapi import APIRouter, Request, status
from fastapi.responses import HTMLResponse

from petbook.presentation.templating import templates

router = APIRouter(tags=["Pages"], include_in_schema=False)


@router.get("/{path:path}", response_class=HTMLResponse)
async def not_found(request: Request) -> HTMLResponse:
    page = request.url.path
    if request.url.query:
        page = f"{page}?{request.url.query}"
    return templates.TemplateResponse(
        request,
        "notFound.html",
        {"page": page},
        status_code=status.HTTP_404_NOT_FOUND,
    )
