"""
Génère une aura depuis le terminal, contre un backend déjà lancé.

Exemple:
    aura-generate --birth-date 2000-07-04 --gender female --vibe celestial \
        --photo portrait.jpg --out aura.png
"""

from __future__ import annotations

import argparse
import asyncio
import base64
import sys
from pathlib import Path

from aura_backend.client.backend_client import BackendClient
from aura_backend.client.controller import AuraController, AuraViewModel
from aura_backend.core.logging import setup_logging
from aura_backend.domain.entities import GENDERS, VIBE_STYLES, GenerationRequest
from aura_backend.domain.zodiac import parse_birth_date


def render_to_terminal(view: AuraViewModel) -> None:
    """Affiche les changements d'état significatifs du view-model."""
    if view.loading_visible:
        print(f"... {view.loading_text}")
    if view.error_visible:
        print(view.error_text, file=sys.stderr)
    if view.result_visible:
        print(f"Zodiac: {view.zodiac_text}")
        print(view.description)


def save_data_uri(data_uri: str, out: Path) -> None:
    """Décode une data URI base64 et l'écrit dans `out`."""
    _, _, payload = data_uri.partition(",")
    out.write_bytes(base64.b64decode(payload))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Génère une image d'aura via le backend")
    parser.add_argument("--backend", type=str, default="http://localhost:3000")
    parser.add_argument("--birth-date", type=str, help="Date de naissance (YYYY-MM-DD)")
    parser.add_argument("--gender", choices=GENDERS, default="female")
    parser.add_argument("--vibe", choices=VIBE_STYLES, default="ethereal")
    parser.add_argument("--photo", type=Path, help="Chemin de la photo à transformer")
    parser.add_argument("--out", type=Path, default=None, help="Fichier de sortie de l'image")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Point d'entrée `aura-generate`; renvoie 0 en cas de succès."""
    args = build_parser().parse_args(argv)
    setup_logging("WARNING")
    try:
        birth = parse_birth_date(args.birth_date) if args.birth_date else None
    except ValueError as err:
        print(f"Invalid birth date: {err}", file=sys.stderr)
        return 2
    if args.photo is not None and not args.photo.is_file():
        print(f"Photo not found: {args.photo}", file=sys.stderr)
        return 2

    controller = AuraController(BackendClient(args.backend), render=render_to_terminal)
    request = GenerationRequest(
        birth_date=birth, gender=args.gender, vibe=args.vibe, photo=args.photo
    )
    result = asyncio.run(controller.generate(request))
    if result is None:
        return 1
    if args.out:
        save_data_uri(result.image_data_uri, args.out)
        print(f"Saved to {args.out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
