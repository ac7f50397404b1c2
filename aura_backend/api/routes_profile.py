"""
Calcul du profil d'aura (signe, âge, prompt, description) à partir de la saisie.

Le genre et le style sont revalidés contre les énumérations connues: le serveur ne fait pas
confiance aux valeurs envoyées par le client.
"""

from fastapi import APIRouter

from aura_backend.api.schemas import AuraProfileRequest, AuraProfileResponse
from aura_backend.apigw.errors import bad_request
from aura_backend.domain.entities import GENDERS, VIBE_STYLES
from aura_backend.domain.prompt import build_profile
from aura_backend.domain.zodiac import parse_birth_date

router = APIRouter(prefix="/api", tags=["profile"])


@router.post("/aura-profile", response_model=AuraProfileResponse)
def aura_profile(payload: AuraProfileRequest):
    """Retourne le profil calculé, ou 400 si une valeur est inconnue ou invalide."""
    if not payload.birthDate:
        raise bad_request("Please enter your birth date.")
    try:
        birth = parse_birth_date(payload.birthDate)
    except ValueError as err:
        raise bad_request("Invalid birth date", str(err)) from err
    if payload.gender not in GENDERS:
        raise bad_request("Unknown gender", f"expected one of: {', '.join(GENDERS)}")
    if payload.vibe not in VIBE_STYLES:
        raise bad_request("Unknown vibe style", f"expected one of: {', '.join(VIBE_STYLES)}")
    profile = build_profile(birth, payload.gender, payload.vibe)
    return AuraProfileResponse(**profile.model_dump())
