"""Définition et chargement des paramètres de configuration applicative.

Objectif du module
------------------
- Centraliser les paramètres (env/.env) via Pydantic Settings
- Résoudre le fichier `.env` à utiliser selon la stratégie: ENV_FILE > .env.{APP_ENV} > .env
- Porter les clés des services tiers (ImgBB, Hugging Face) côté serveur uniquement
"""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Détermination du fichier .env à utiliser avec priorité:
# 1) ENV_FILE (chemin explicite)
# 2) .env.{APP_ENV} si présent
# 3) .env (défaut)
_cwd = Path.cwd()
_env_file_from_env = os.getenv("ENV_FILE")
if _env_file_from_env:
    _ENV_FILE_PATH = _env_file_from_env
else:
    _app_env = os.getenv("APP_ENV", "dev")
    _candidate_specific = _cwd / f".env.{_app_env}"
    _candidate_default = _cwd / ".env"
    if _candidate_specific.exists():
        _ENV_FILE_PATH = _candidate_specific
    else:
        _ENV_FILE_PATH = _candidate_default


class Settings(BaseSettings):
    """Modèle de configuration chargé depuis l'environnement et .env."""

    model_config = SettingsConfigDict(
        env_file=_ENV_FILE_PATH,
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=False,
    )
    APP_NAME: str = "aura-backend"
    APP_ENV: str = "dev"
    APP_DEBUG: bool = False
    APP_HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    CORS_ORIGINS: list[str] = ["*"]

    # Hébergeur d'images
    IMGBB_API_KEY: str | None = None
    IMGBB_UPLOAD_URL: str = "https://api.imgbb.com/1/upload"

    # Inférence (img2img)
    HUGGINGFACE_API_KEY: str | None = None
    HF_MODEL_ID: str = "stabilityai/stable-diffusion-xl-base-1.0"
    HF_INFERENCE_BASE_URL: str = "https://api-inference.huggingface.co/models"
    HF_STRENGTH: float = 0.3
    HF_NUM_INFERENCE_STEPS: int = 50

    # None = pas de timeout sur les appels sortants
    UPSTREAM_TIMEOUT_SECONDS: float | None = None

    @property
    def hf_model_url(self) -> str:
        """URL complète du modèle d'inférence configuré."""
        return f"{self.HF_INFERENCE_BASE_URL.rstrip('/')}/{self.HF_MODEL_ID}"


def get_settings() -> Settings:
    """Construit et retourne la configuration de l'application."""
    return Settings()
