"""Routes for the theme preference."""

import logging
from fastapi import APIRouter, Depends

from ..schemas.theme_schemas import ThemeResponse, ThemeUpdateRequest
from ..services.singleton import get_theme_store
from ..services.theme_service import ThemeStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/theme", tags=["theme"])


def _theme_response(store: ThemeStore) -> ThemeResponse:
    return ThemeResponse(dark_mode=store.dark_mode, icon=store.icon)


@router.get("", response_model=ThemeResponse)
async def get_theme(store: ThemeStore = Depends(get_theme_store)):
    """Get the stored theme preference."""
    return _theme_response(store)


@router.post("/toggle", response_model=ThemeResponse)
async def toggle_theme(store: ThemeStore = Depends(get_theme_store)):
    """Flip dark mode and persist the new preference."""
    store.toggle()
    return _theme_response(store)


@router.put("", response_model=ThemeResponse)
async def set_theme(request: ThemeUpdateRequest, store: ThemeStore = Depends(get_theme_store)):
    store.set_dark_mode(request.dark_mode)
    return _theme_response(store)
