"""
Tests pour la résolution des variables d'environnement et le conteneur.
"""

from __future__ import annotations

import importlib
from pathlib import Path

from aura_backend.core.container import Container


def test_settings_reads_env_file(tmp_path: Path, monkeypatch) -> None:
    """Les valeurs d'un fichier .env désigné par ENV_FILE sont appliquées."""
    env = tmp_path / ".env.custom"
    env.write_text("PORT=4321\nHF_NUM_INFERENCE_STEPS=7\n", encoding="utf-8")
    monkeypatch.setenv("ENV_FILE", str(env))

    settings_mod = importlib.import_module("aura_backend.core.settings")
    importlib.reload(settings_mod)
    try:
        s = settings_mod.get_settings()
        assert s.PORT == 4321
        assert s.HF_NUM_INFERENCE_STEPS == 7
    finally:
        monkeypatch.delenv("ENV_FILE")
        importlib.reload(settings_mod)


def test_defaults(monkeypatch) -> None:
    for key in ("PORT", "HF_STRENGTH", "UPSTREAM_TIMEOUT_SECONDS", "HF_MODEL_ID"):
        monkeypatch.delenv(key, raising=False)
    from aura_backend.core.settings import Settings

    s = Settings(_env_file=None)
    assert s.PORT == 3000
    assert s.HF_STRENGTH == 0.3
    assert s.UPSTREAM_TIMEOUT_SECONDS is None
    assert s.hf_model_url == (
        "https://api-inference.huggingface.co/models/stabilityai/stable-diffusion-xl-base-1.0"
    )


def test_container_wires_credentials(monkeypatch) -> None:
    from aura_backend.core.settings import Settings

    s = Settings(_env_file=None, IMGBB_API_KEY="k1", HUGGINGFACE_API_KEY=None)
    c = Container(settings=s)
    assert c.imgbb.api_key == "k1"
    assert c.inference.model_url == s.hf_model_url
    assert c.credentials_status() == {"huggingface_key": "Not Loaded", "imgbb_key": "Loaded"}
