"""
Client HTTP asynchrone vers les endpoints de relais du backend.

Utilisé par le contrôleur côté client (CLI, tests). La lecture de la photo et l'envoi sont
enchaînés dans une seule coroutine: on attend les octets, puis la réponse réseau.
"""

from __future__ import annotations

import asyncio
import mimetypes
from pathlib import Path

import httpx

from aura_backend.core.http_constants import UPLOAD_INPUT_MIME
from aura_backend.infra.http_clients import to_data_uri


class BackendError(RuntimeError):
    """Échec d'un appel au backend, message prêt à afficher."""


def _error_details(resp: httpx.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        return resp.reason_phrase
    if isinstance(body, dict) and body.get("details"):
        return str(body["details"])
    return resp.reason_phrase


class BackendClient:
    """Appelle `/api/upload-image-to-imgbb` puis `/api/generate-aura`."""

    def __init__(
        self,
        base_url: str = "http://localhost:3000",
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url, timeout=httpx.Timeout(self.timeout), transport=self.transport
        )

    async def read_photo(self, photo: bytes | Path) -> str:
        """Retourne la photo en data URI (lecture disque hors boucle d'événements)."""
        if isinstance(photo, Path):
            data = await asyncio.to_thread(photo.read_bytes)
            mime = mimetypes.guess_type(photo.name)[0] or UPLOAD_INPUT_MIME
        else:
            data, mime = photo, UPLOAD_INPUT_MIME
        return to_data_uri(data, mime)

    async def upload_photo(self, photo: bytes | Path) -> str:
        """Lit la photo puis la relaie vers l'hébergeur; renvoie l'URL publique.

        Raises:
            BackendError: réponse non 2xx ou erreur réseau.
        """
        image_data = await self.read_photo(photo)
        async with self._client() as client:
            try:
                resp = await client.post(
                    "/api/upload-image-to-imgbb", json={"imageData": image_data}
                )
            except httpx.HTTPError as exc:
                raise BackendError(f"Server-side image upload failed: {exc}") from exc
        if not resp.is_success:
            raise BackendError(f"Server-side image upload failed: {_error_details(resp)}")
        return resp.json()["imageUrl"]

    async def generate_aura(self, prompt: str, image_url: str) -> str:
        """Demande la génération et renvoie la première image produite (data URI).

        Raises:
            BackendError: réponse non 2xx, champ `error`, ou sortie vide.
        """
        async with self._client() as client:
            try:
                resp = await client.post(
                    "/api/generate-aura", json={"prompt": prompt, "imageUrl": image_url}
                )
            except httpx.HTTPError as exc:
                raise BackendError(f"AI generation failed: {exc}") from exc
        if not resp.is_success:
            raise BackendError(f"AI generation failed: {_error_details(resp)}")
        data = resp.json()
        output = data.get("output") or []
        if data.get("error") or not output:
            raise BackendError(
                f"AI generation failed: {data.get('details') or 'No image output from AI.'}"
            )
        return output[0]
