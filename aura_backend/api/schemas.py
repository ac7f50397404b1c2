# Schémas Pydantic exposés par l'API (requêtes et réponses).
# Les noms de champs JSON restent en camelCase pour le front statique.

from pydantic import BaseModel, Field


class UploadImageRequest(BaseModel):
    """Requête d'upload: image encodée en data URI (ou base64 brut)."""

    imageData: str | None = None


class UploadImageResponse(BaseModel):
    """URL publique de l'image hébergée."""

    imageUrl: str


class GenerateAuraRequest(BaseModel):
    """Requête de génération: prompt et URL de l'image source."""

    prompt: str | None = None
    imageUrl: str | None = None


class GenerateAuraResponse(BaseModel):
    """Images produites, en data URI (un seul élément en pratique)."""

    output: list[str]


class AuraProfileRequest(BaseModel):
    """Saisie utilisateur pour le calcul du profil."""

    birthDate: str | None = None
    gender: str = "female"
    vibe: str = "ethereal"


class AuraProfileResponse(BaseModel):
    """Profil calculé côté serveur."""

    zodiac: str
    age: int
    prompt: str
    description: str


class ErrorResponse(BaseModel):
    """Enveloppe d'erreur uniforme des endpoints `/api`."""

    error: str
    details: str | None = Field(default=None)
