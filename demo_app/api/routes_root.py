"""Root page endpoint."""

from html import escape

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from demo_app.config import settings

router = APIRouter(tags=["root"])


def render_anchor(url: str, text: str) -> str:
    """Build the link shown on the root page."""
    return (
        f'<a href="{escape(url, quote=True)}" target="_blank" '
        f'rel="noopener noreferrer">{escape(text, quote=False)}</a>'
    )


@router.get("/", response_class=HTMLResponse)
async def root():
    return HTMLResponse(render_anchor(settings.repo_url, settings.link_text))
