"""Server-rendered pages: home, the two listings and the two form pages."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import FileResponse, HTMLResponse

from petbook.application.services import PetService
from petbook.infrastructure.dependencies import get_pet_service
from petbook.presentation.templating import STATIC_DIR, templates

router = APIRouter(tags=["Pages"], default_response_class=HTMLResponse)


@router.get("/")
async def index(
    request: Request,
    service: PetService = Depends(get_pet_service),
) -> HTMLResponse:
    """Home page showing the name of the last added record."""
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "currentName": service.last_added.name,
            "title": "Home",
            "pageName": request.url.path,
        },
    )


@router.get("/page1")
async def cat_listing(
    request: Request,
    service: PetService = Depends(get_pet_service),
) -> HTMLResponse:
    """List every stored cat. Storage failures are answered as JSON."""
    cats = await service.list_cats()
    return templates.TemplateResponse(request, "page1.html", {"cats": cats})


@router.get("/page2")
async def cat_form(request: Request) -> HTMLResponse:
    return templates.TemplateResponse(request, "page2.html", {})


@router.get("/page3")
async def dog_form(request: Request) -> HTMLResponse:
    return templates.TemplateResponse(request, "page3.html", {})


@router.get("/page4")
async def dog_listing(
    request: Request,
    service: PetService = Depends(get_pet_service),
) -> HTMLResponse:
    """List every stored dog. Storage failures are answered as JSON."""
    dogs = await service.list_dogs()
    return templates.TemplateResponse(request, "page4.html", {"dogs": dogs})


@router.get("/favicon.ico", include_in_schema=False)
async def favicon() -> FileResponse:
    return FileResponse(STATIC_DIR / "favicon.svg", media_type="image/svg+xml")
