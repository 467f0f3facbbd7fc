from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel

from ...media import list_known_pages, resolve_reference
from ...storages.base import KnownPage

router = APIRouter(tags=["pages"])


class PagesResponse(BaseModel):
    success: bool = True
    pages: list[KnownPage]


class ResolveResponse(BaseModel):
    success: bool = True
    url: str


@router.get("/pages", response_model=PagesResponse)
def get_pages(request: Request):
    return PagesResponse(pages=list_known_pages(request.app.state.store))


@router.get("/media/resolve", response_model=ResolveResponse)
def resolve_media(request: Request, bucket: str, ref: str):
    url = resolve_reference(bucket, ref, request.app.state.config.media.base_url)
    if not url:
        raise HTTPException(status_code=404, detail=f"Cannot resolve media reference: {ref}")
    return ResolveResponse(url=url)
