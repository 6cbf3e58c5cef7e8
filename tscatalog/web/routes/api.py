"""REST API routes."""

import asyncio
from typing import Optional

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel

from ...resolution.resolver import resolve

router = APIRouter()


# Request/Response models
class ResolveRequest(BaseModel):
    context: str
    source: str
    disambiguation: Optional[str] = None
    count: Optional[int] = None
    args: list[str] = []


class ResolveResponse(BaseModel):
    text: str
    language: str


class LanguageRequest(BaseModel):
    language: str


@router.get("/catalogs")
async def list_catalogs(request: Request):
    """Active language and per-catalog statistics."""
    manager = request.app.state.catalog_manager
    snapshot = manager.current()

    return {
        "language": snapshot.language_tag,
        "available_languages": sorted(
            {tag for name in manager.catalog_names for tag in manager.locator.find_languages(name)}
        ),
        "catalogs": [
            {
                "language": catalog.language_tag,
                "total": len(catalog),
                "finished": catalog.finished_count,
                "unfinished": catalog.unfinished_count,
                "obsolete": catalog.obsolete_count,
                "warnings": len(catalog.warnings),
            }
            for catalog in snapshot.catalogs
        ],
    }


@router.post("/resolve", response_model=ResolveResponse)
async def resolve_message(request: Request, body: ResolveRequest):
    """Resolve one message against the active catalogs."""
    manager = request.app.state.catalog_manager
    snapshot = manager.current()

    text = resolve(
        snapshot,
        body.context,
        body.source,
        body.disambiguation,
        body.count,
        body.args,
    )
    return ResolveResponse(text=text, language=snapshot.language_tag)


@router.post("/language")
async def switch_language(request: Request, body: LanguageRequest):
    """Load and publish the catalogs for another language."""
    manager = request.app.state.catalog_manager

    language = body.language.strip()
    if not language:
        raise HTTPException(400, "Language must not be empty")

    if not any(manager.locator.locate(name, language) for name in manager.catalog_names):
        raise HTTPException(404, f"No catalogs found for language '{language}'")

    # Loading reads files; keep it off the event loop
    snapshot = await asyncio.to_thread(manager.switch_language, language)

    return {
        "language": snapshot.language_tag,
        "catalogs": len(snapshot.catalogs),
    }
