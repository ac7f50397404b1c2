"""
Contrôleur du parcours "Generate Aura" côté client.

Le contrôleur ne manipule aucun élément d'interface: il maintient un `AuraViewModel` (données
pures) et le transmet à une fonction `render` après chaque transition. Le nettoyage (masquer le
chargement, réactiver le bouton) s'exécute quelle que soit l'issue.

Transitions:
    IDLE -> VALIDATING -> UPLOADING -> GENERATING -> SUCCESS | FAILED -> IDLE
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Callable
from dataclasses import dataclass, replace
from enum import Enum

import structlog

from aura_backend.client.backend_client import BackendClient
from aura_backend.domain.entities import GeneratedAuraResult, GenerationRequest
from aura_backend.domain.prompt import build_profile

log = structlog.get_logger(__name__)

BUTTON_LABEL = "Generate Aura"
BUTTON_BUSY_LABEL = "Generating..."
MISSING_BIRTH_DATE = "Please enter your birth date."
MISSING_PHOTO = "Please upload your photo first!"
UPLOADING_TEXT = "Uploading image..."
GENERATING_TEXT = "Generating aura..."


class ControllerState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    UPLOADING = "uploading"
    GENERATING = "generating"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class AuraViewModel:
    """État affichable de la page."""

    button_label: str = BUTTON_LABEL
    button_enabled: bool = True
    loading_visible: bool = False
    loading_text: str = ""
    result_visible: bool = False
    result_image: str = ""
    zodiac_text: str = ""
    description: str = ""
    error_visible: bool = False
    error_text: str = ""


def error_message(reason: str) -> str:
    """Message d'erreur affiché à l'utilisateur."""
    return f"Ouch! An error occurred: {reason}. Please try again."


class AuraController:
    """Orchestre validation, upload, génération et rendu.

    Paramètres:
    - backend: client des relais (upload puis génération, strictement en séquence).
    - render: fonction appelée avec le nouvel `AuraViewModel` à chaque changement.
    - today: date de référence pour le calcul de l'âge (aujourd'hui par défaut).
    """

    def __init__(
        self,
        backend: BackendClient,
        render: Callable[[AuraViewModel], None] | None = None,
        today: dt.date | None = None,
    ) -> None:
        self.backend = backend
        self.render = render or (lambda view: None)
        self.today = today
        self.state = ControllerState.IDLE
        self.view = AuraViewModel()

    def _update(self, state: ControllerState | None = None, **changes) -> None:
        if state is not None:
            self.state = state
        self.view = replace(self.view, **changes)
        self.render(self.view)

    def _show_error(self, text: str) -> None:
        self._update(
            ControllerState.FAILED,
            result_visible=False,
            result_image="",
            zodiac_text="",
            description="",
            error_visible=True,
            error_text=text,
        )

    def _validate(self, request: GenerationRequest) -> str | None:
        if not request.birth_date:
            return MISSING_BIRTH_DATE
        if not request.photo:
            return MISSING_PHOTO
        return None

    async def generate(self, request: GenerationRequest) -> GeneratedAuraResult | None:
        """Exécute le parcours complet; renvoie le résultat, ou None en cas d'échec."""
        self._update(ControllerState.VALIDATING, error_visible=False, error_text="")
        problem = self._validate(request)
        if problem:
            self._show_error(problem)
            self.state = ControllerState.IDLE
            return None

        profile = build_profile(request.birth_date, request.gender, request.vibe, self.today)
        log.debug("aura_profile", zodiac=profile.zodiac, age=profile.age)
        self._update(
            ControllerState.UPLOADING,
            result_visible=False,
            result_image="",
            button_label=BUTTON_BUSY_LABEL,
            button_enabled=False,
            loading_visible=True,
            loading_text=UPLOADING_TEXT,
        )
        result: GeneratedAuraResult | None = None
        try:
            image_url = await self.backend.upload_photo(request.photo)
            log.info("image_uploaded", image_url=image_url)
            self._update(ControllerState.GENERATING, loading_text=GENERATING_TEXT)
            image = await self.backend.generate_aura(profile.prompt, image_url)
            result = GeneratedAuraResult(
                image_data_uri=image, zodiac=profile.zodiac, description=profile.description
            )
            self._update(
                ControllerState.SUCCESS,
                result_visible=True,
                result_image=result.image_data_uri,
                zodiac_text=result.zodiac,
                description=result.description,
                error_visible=False,
                error_text="",
            )
        except Exception as exc:
            log.error("generation_flow_error", error=str(exc))
            self._show_error(error_message(str(exc)))
        finally:
            self._update(
                loading_visible=False,
                loading_text="",
                button_enabled=True,
                button_label=BUTTON_LABEL,
            )
            self.state = ControllerState.IDLE
        return result
