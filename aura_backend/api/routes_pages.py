"""Page d'accueil statique (formulaire de génération)."""

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

PUBLIC_DIR = Path(__file__).resolve().parent.parent / "public"

router = APIRouter(tags=["pages"])


@router.get("/", include_in_schema=False)
def index():
    """Sert `index.html`."""
    return FileResponse(PUBLIC_DIR / "index.html", media_type="text/html")
