"""Configuration de test pour pytest avec gestion des chemins.

Ce module ajoute la racine du projet au sys.path et fournit des fixtures pour simuler les
services tiers (ImgBB, Hugging Face) via `httpx.MockTransport`.
"""

import os
import sys
from collections.abc import Callable

import httpx
import pytest

# Ensure project root is on sys.path so that
# imports like `from aura_backend...` resolve.
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from fastapi.testclient import TestClient  # noqa: E402

from aura_backend.core.container import container  # noqa: E402


@pytest.fixture
def client() -> TestClient:
    """Client de test sur l'application complète."""
    from aura_backend.app.main import app

    return TestClient(app)


@pytest.fixture
def mock_upstream(monkeypatch) -> Callable:
    """Installe un handler unique pour tous les appels sortants du conteneur.

    Retourne une fonction qui prend le handler et renvoie la liste des requêtes interceptées.
    """

    def _install(handler: Callable[[httpx.Request], httpx.Response]) -> list[httpx.Request]:
        seen: list[httpx.Request] = []

        def _recording(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return handler(request)

        transport = httpx.MockTransport(_recording)
        monkeypatch.setattr(container.imgbb, "transport", transport)
        monkeypatch.setattr(container.inference, "transport", transport)
        return seen

    return _install


@pytest.fixture(autouse=True)
def _restore_structlog_config():
    """Restaure la configuration structlog après chaque test.

    `setup_logging` lie le flux `sys.stdout` courant ; sous `capsys`, ce flux est fermé à la
    fin du test et ne doit pas fuir vers les tests suivants.
    """
    import structlog

    saved = structlog.get_config()
    yield
    structlog.configure(**saved)
