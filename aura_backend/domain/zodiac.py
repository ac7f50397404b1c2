"""
Calculs calendaires: signe du zodiaque et âge à partir d'une date de naissance.

Fonctions pures, sans dépendance externe. Les bornes des signes sont
inclusives des deux côtés et couvrent toutes les dates valides.
"""

from __future__ import annotations

import datetime as dt

UNKNOWN_ZODIAC = "Unknown Zodiac"

# (signe, (mois, jour) de début, (mois, jour) de fin), bornes incluses
ZODIAC_RANGES: list[tuple[str, tuple[int, int], tuple[int, int]]] = [
    ("Aquarius", (1, 20), (2, 18)),
    ("Pisces", (2, 19), (3, 20)),
    ("Aries", (3, 21), (4, 19)),
    ("Taurus", (4, 20), (5, 20)),
    ("Gemini", (5, 21), (6, 20)),
    ("Cancer", (6, 21), (7, 22)),
    ("Leo", (7, 23), (8, 22)),
    ("Virgo", (8, 23), (9, 22)),
    ("Libra", (9, 23), (10, 22)),
    ("Scorpio", (10, 23), (11, 21)),
    ("Sagittarius", (11, 22), (12, 21)),
    ("Capricorn", (12, 22), (1, 19)),
]

ZODIAC_SIGNS: tuple[str, ...] = tuple(name for name, _, _ in ZODIAC_RANGES)


def _in_range(md: tuple[int, int], start: tuple[int, int], end: tuple[int, int]) -> bool:
    if start <= end:
        return start <= md <= end
    # Plage à cheval sur le changement d'année (Capricorne)
    return md >= start or md <= end


def zodiac_sign(date: dt.date) -> str:
    """Retourne le signe du zodiaque correspondant à `date`.

    Paramètres:
    - date: date de naissance (seuls le mois et le jour comptent).

    Retour: l'un des 12 signes, ou `UNKNOWN_ZODIAC` si aucune plage ne correspond.
    """
    md = (date.month, date.day)
    for name, start, end in ZODIAC_RANGES:
        if _in_range(md, start, end):
            return name
    return UNKNOWN_ZODIAC


def calculate_age(birth: dt.date, today: dt.date | None = None) -> int:
    """Calcule l'âge en années révolues.

    L'anniversaire du jour compte comme déjà passé (pas de décrément).
    """
    today = today or dt.date.today()
    age = today.year - birth.year
    if (today.month, today.day) < (birth.month, birth.day):
        age -= 1
    return age


def parse_birth_date(value: str | dt.date, today: dt.date | None = None) -> dt.date:
    """Convertit une saisie en date de naissance valide.

    Accepte un objet `date` ou une chaîne ISO `YYYY-MM-DD`.

    Raises:
        ValueError: chaîne vide, format invalide, ou date dans le futur.
    """
    if isinstance(value, dt.datetime):
        parsed = value.date()
    elif isinstance(value, dt.date):
        parsed = value
    else:
        raw = (value or "").strip()
        if not raw:
            raise ValueError("birth date is required")
        try:
            parsed = dt.date.fromisoformat(raw)
        except ValueError as err:
            raise ValueError(f"invalid birth date: {raw!r}") from err
    if parsed > (today or dt.date.today()):
        raise ValueError("birth date is in the future")
    return parsed
