"""
Conteneur d'injection de dépendances et configuration application.

Instancie les composants centraux (settings, clients ImgBB et Hugging Face)
et expose un singleton `container` utilisé par le reste de l'application.
"""

import structlog

from aura_backend.core.settings import Settings, get_settings
from aura_backend.infra.http_clients import HuggingFaceClient, ImgBBClient


class Container:
    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        s = self.settings
        self.imgbb = ImgBBClient(
            api_key=s.IMGBB_API_KEY,
            upload_url=s.IMGBB_UPLOAD_URL,
            timeout=s.UPSTREAM_TIMEOUT_SECONDS,
        )
        self.inference = HuggingFaceClient(
            api_key=s.HUGGINGFACE_API_KEY,
            model_url=s.hf_model_url,
            strength=s.HF_STRENGTH,
            num_inference_steps=s.HF_NUM_INFERENCE_STEPS,
            timeout=s.UPSTREAM_TIMEOUT_SECONDS,
        )

    def credentials_status(self) -> dict[str, str]:
        """État de chargement des clés, sans jamais exposer leur valeur."""
        return {
            "huggingface_key": "Loaded" if self.settings.HUGGINGFACE_API_KEY else "Not Loaded",
            "imgbb_key": "Loaded" if self.settings.IMGBB_API_KEY else "Not Loaded",
        }

    def log_startup_diagnostics(self) -> None:
        """Journalise la présence des clés au démarrage (valeurs jamais loguées)."""
        structlog.get_logger(__name__).info("credentials_status", **self.credentials_status())


container = Container()
