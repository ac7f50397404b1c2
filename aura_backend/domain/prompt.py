"""
Construction du prompt de génération à partir du profil astrologique.

Le style ("vibe") est projeté sur un descripteur fixe; un style inconnu retombe sur
un descripteur générique.
"""

from __future__ import annotations

import datetime as dt

from aura_backend.domain.entities import AuraProfile
from aura_backend.domain.zodiac import calculate_age, zodiac_sign

DEFAULT_VIBE_DESCRIPTOR = "magical aura, glowing colors"

VIBE_DESCRIPTORS: dict[str, str] = {
    "ethereal": "ethereal glow, soft atmospheric, delicate light",
    "cyberpunk": "cyberpunk neon lights, dystopian cityscape, glowing wires",
    "mystic": "ancient mysticism, arcane symbols, deep magical glow",
    "celestial": "cosmic stardust, swirling galaxy, nebulae colors",
    "crystalline": "shimmering crystal facets, glowing gemstone light",
    "bioluminescent": "glowing organic patterns, natural light, glowing flora",
    "vaporwave": "pastel neon aesthetic, retro grid lines, synthwave glow",
    "painterly": "expressive brushstrokes, watercolor texture, artistic render",
}


def vibe_descriptor(vibe: str | None) -> str:
    """Retourne le descripteur associé au style, ou le descripteur par défaut."""
    return VIBE_DESCRIPTORS.get(vibe or "", DEFAULT_VIBE_DESCRIPTOR)


def build_prompt(age: int, gender: str, zodiac: str, vibe: str | None) -> str:
    """Assemble le prompt envoyé tel quel à l'API d'inférence."""
    return (
        f"portrait of a {age}-year-old {gender}, {zodiac} aura, "
        f"{vibe_descriptor(vibe)}, high detail, intricate, digital art"
    )


def describe_aura(zodiac: str, vibe: str | None) -> str:
    """Phrase affichée sous l'image générée."""
    return f"Behold, your majestic {zodiac} aura in a {vibe} style!"


def build_profile(
    birth_date: dt.date, gender: str, vibe: str, today: dt.date | None = None
) -> AuraProfile:
    """Calcule signe, âge, prompt et description pour une saisie validée.

    Paramètres:
    - birth_date: date de naissance déjà validée.
    - gender: genre tel que saisi.
    - vibe: style choisi.
    - today: date de référence pour l'âge (aujourd'hui par défaut).
    """
    zodiac = zodiac_sign(birth_date)
    age = calculate_age(birth_date, today)
    return AuraProfile(
        zodiac=zodiac,
        age=age,
        prompt=build_prompt(age, gender, zodiac, vibe),
        description=describe_aura(zodiac, vibe),
    )
