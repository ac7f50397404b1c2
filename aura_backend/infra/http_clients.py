"""Clients HTTP externes (hébergeur d'images ImgBB, inférence Hugging Face).

Objectif du module
------------------
- Encapsuler les appels réseau vers les services tiers.
- Convertir toute défaillance (réseau, statut HTTP, erreur applicative) en `RelayError`
  portant un message exploitable côté utilisateur.
"""

from __future__ import annotations

import base64
import json

import httpx
import structlog

from aura_backend.core.http_constants import DEFAULT_OUTPUT_MIME, UPLOAD_INPUT_MIME
from aura_backend.domain.entities import UploadedImageRef

log = structlog.get_logger(__name__)


class RelayError(RuntimeError):
    """Échec d'un relais vers un service tiers."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        """Initialise l'erreur avec le message et le statut amont éventuel."""
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ImgBBRejectedError(RelayError):
    """ImgBB a répondu 2xx mais avec `success: false`."""


class ImageFetchError(RelayError):
    """L'image à transformer n'a pas pu être téléchargée."""


def strip_data_uri(image_data: str) -> str:
    """Retire un éventuel préfixe `data:*;base64,` et renvoie la charge base64."""
    _, sep, tail = image_data.partition(",")
    return tail if sep and tail else image_data


def to_data_uri(payload: bytes, mime: str | None) -> str:
    """Encode des octets en data URI base64."""
    encoded = base64.b64encode(payload).decode("ascii")
    return f"data:{mime or DEFAULT_OUTPUT_MIME};base64,{encoded}"


def _error_details(resp: httpx.Response, extract) -> str:
    """Extrait le message d'erreur d'un corps JSON, sinon renvoie le texte brut."""
    text = resp.text
    try:
        payload = json.loads(text)
    except ValueError:
        return text
    details = extract(payload) if isinstance(payload, dict) else None
    return str(details) if details else text


def _imgbb_error_message(payload: dict) -> str | None:
    error = payload.get("error")
    if isinstance(error, dict):
        return error.get("message")
    return None


def _build_client(
    timeout: float | None, transport: httpx.AsyncBaseTransport | None
) -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=httpx.Timeout(timeout), transport=transport)


class ImgBBClient:
    """Client d'upload vers ImgBB (formulaire urlencodé, clé en paramètre de requête)."""

    def __init__(
        self,
        api_key: str | None,
        upload_url: str,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialise le client avec la clé serveur et l'URL d'upload."""
        self.api_key = api_key or ""
        self.upload_url = upload_url
        self.timeout = timeout
        self.transport = transport
        self._log = log.bind(component="imgbb_client")

    async def upload(self, image_data: str) -> UploadedImageRef:
        """Envoie une image (data URI ou base64 brut) et renvoie son URL publique.

        Raises:
            RelayError: statut non 2xx ou erreur réseau.
            ImgBBRejectedError: réponse 2xx avec `success: false`.
        """
        payload = strip_data_uri(image_data)
        async with _build_client(self.timeout, self.transport) as client:
            try:
                resp = await client.post(
                    self.upload_url,
                    params={"key": self.api_key},
                    data={"image": payload},
                )
            except httpx.HTTPError as exc:
                raise RelayError(f"ImgBB upload failed: {exc}") from exc

        if not resp.is_success:
            details = _error_details(resp, _imgbb_error_message)
            self._log.error("imgbb_upload_error", status=resp.status_code, details=details)
            raise RelayError(f"ImgBB upload failed: {details}", status_code=resp.status_code)

        try:
            body = resp.json()
        except ValueError as exc:
            raise RelayError(f"ImgBB upload failed: invalid JSON response ({exc})") from exc

        if not isinstance(body, dict) or not body.get("success"):
            self._log.error("imgbb_api_response_error", body=body)
            message = _imgbb_error_message(body) if isinstance(body, dict) else None
            raise ImgBBRejectedError(message or "Unknown ImgBB error")
        try:
            return UploadedImageRef(url=body["data"]["url"])
        except (KeyError, TypeError) as exc:
            raise ImgBBRejectedError("ImgBB response is missing data.url") from exc


class HuggingFaceClient:
    """Client img2img vers l'API d'inférence Hugging Face.

    Télécharge l'image source, l'envoie en data URI avec le prompt et des paramètres
    fixes (`strength`, `num_inference_steps`), puis renvoie l'image produite en data URI.
    """

    def __init__(
        self,
        api_key: str | None,
        model_url: str,
        strength: float = 0.3,
        num_inference_steps: int = 50,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialise le client avec le jeton Bearer et les paramètres d'inférence."""
        self.api_key = api_key or ""
        self.model_url = model_url
        self.strength = strength
        self.num_inference_steps = num_inference_steps
        self.timeout = timeout
        self.transport = transport
        self._log = log.bind(component="huggingface_client")

    async def fetch_image(self, image_url: str) -> bytes:
        """Télécharge les octets de l'image source.

        Raises:
            ImageFetchError: statut non 2xx ou erreur réseau.
        """
        async with _build_client(self.timeout, self.transport) as client:
            try:
                resp = await client.get(image_url, follow_redirects=True)
            except httpx.HTTPError as exc:
                self._log.error("image_fetch_error", url=image_url, error=str(exc))
                raise ImageFetchError(f"Failed to fetch image: {exc}") from exc
        if not resp.is_success:
            self._log.error("image_fetch_error", url=image_url, status=resp.status_code)
            raise ImageFetchError(
                f"Failed to fetch image: {resp.reason_phrase}", status_code=resp.status_code
            )
        return resp.content

    def build_payload(self, prompt: str, image_bytes: bytes) -> dict:
        """Corps JSON attendu par l'API d'inférence."""
        return {
            "inputs": prompt,
            "parameters": {
                "image": to_data_uri(image_bytes, UPLOAD_INPUT_MIME),
                "strength": self.strength,
                "num_inference_steps": self.num_inference_steps,
            },
        }

    async def generate(self, prompt: str, image_url: str) -> str:
        """Produit l'image d'aura et la renvoie en data URI.

        Raises:
            ImageFetchError: l'image source est inaccessible.
            RelayError: l'API d'inférence a échoué.
        """
        image_bytes = await self.fetch_image(image_url)
        headers = {"Authorization": f"Bearer {self.api_key}"}
        async with _build_client(self.timeout, self.transport) as client:
            try:
                resp = await client.post(
                    self.model_url, headers=headers, json=self.build_payload(prompt, image_bytes)
                )
            except httpx.HTTPError as exc:
                raise RelayError(f"Hugging Face API failed: {exc}") from exc

        if not resp.is_success:
            details = _error_details(resp, lambda payload: payload.get("error"))
            self._log.error("huggingface_api_error", status=resp.status_code, details=details)
            raise RelayError(f"Hugging Face API failed: {details}", status_code=resp.status_code)

        mime = resp.headers.get("content-type") or DEFAULT_OUTPUT_MIME
        return to_data_uri(resp.content, mime)
