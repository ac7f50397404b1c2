"""
Endpoint de santé pour vérifier la disponibilité de l'API.

Expose `/health` avec l'état de chargement des clés des services tiers.
"""


from fastapi import APIRouter

from aura_backend.core.container import container

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    """Vérifie la disponibilité de l'API et la présence des clés."""
    return {"status": "ok", **container.credentials_status()}
