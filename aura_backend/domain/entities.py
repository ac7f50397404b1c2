"""
Entités du domaine métier.

Ce module définit les modèles de données éphémères manipulés pendant une génération d'aura.
Aucune de ces entités n'est persistée.
"""

import datetime as dt
from pathlib import Path
from typing import Literal, get_args

from pydantic import BaseModel

Gender = Literal["female", "male", "non-binary"]
VibeStyle = Literal[
    "ethereal",
    "cyberpunk",
    "mystic",
    "celestial",
    "crystalline",
    "bioluminescent",
    "vaporwave",
    "painterly",
]

GENDERS: tuple[str, ...] = get_args(Gender)
VIBE_STYLES: tuple[str, ...] = get_args(VibeStyle)


class GenerationRequest(BaseModel):
    """Saisie utilisateur pour une génération (date, genre, style, photo)."""

    birth_date: dt.date | None = None
    gender: str = "female"
    vibe: str = "ethereal"
    photo: bytes | Path | None = None


class UploadedImageRef(BaseModel):
    """URL publique renvoyée par l'hébergeur d'images."""

    url: str


class AuraProfile(BaseModel):
    """Signe, âge, prompt et description dérivés d'une saisie validée."""

    zodiac: str
    age: int
    prompt: str
    description: str


class GeneratedAuraResult(BaseModel):
    """Résultat affichable: image (data URI), signe et description."""

    image_data_uri: str
    zodiac: str
    description: str
