"""
Routes de relais vers les services tiers: upload ImgBB et génération Hugging Face.

Chaque handler est sans état: il transforme la requête, appelle le client externe du conteneur
et convertit toute défaillance en enveloppe `{error, details}` (400 pour une saisie manquante,
500 sinon).
"""

import structlog
from fastapi import APIRouter

from aura_backend.api.schemas import (
    GenerateAuraRequest,
    GenerateAuraResponse,
    UploadImageRequest,
    UploadImageResponse,
)
from aura_backend.apigw.errors import bad_request, internal_error
from aura_backend.app.metrics import observe_relay
from aura_backend.core.container import container
from aura_backend.infra.http_clients import ImageFetchError, ImgBBRejectedError, RelayError

router = APIRouter(prefix="/api", tags=["relay"])
log = structlog.get_logger(__name__)


@router.post("/upload-image-to-imgbb", response_model=UploadImageResponse)
async def upload_image_to_imgbb(payload: UploadImageRequest):
    """
    Relaie une image encodée vers ImgBB et renvoie son URL publique.

    Paramètres:
    - payload: `UploadImageRequest` avec `imageData` (data URI ou base64).

    Retour: `UploadImageResponse` (`imageUrl`).
    """
    if not payload.imageData:
        raise bad_request("No image data provided.")
    try:
        with observe_relay("upload"):
            ref = await container.imgbb.upload(payload.imageData)
    except ImgBBRejectedError as err:
        raise internal_error("Failed to upload image to ImgBB", err.message) from err
    except RelayError as err:
        log.error("imgbb_proxy_error", details=err.message)
        raise internal_error(
            "An internal server error occurred during image upload.", err.message
        ) from err
    log.info("image_uploaded", image_url=ref.url)
    return UploadImageResponse(imageUrl=ref.url)


@router.post("/generate-aura", response_model=GenerateAuraResponse)
async def generate_aura(payload: GenerateAuraRequest):
    """
    Télécharge l'image source, la soumet avec le prompt à l'API d'inférence et renvoie le
    résultat en data URI.

    Paramètres:
    - payload: `GenerateAuraRequest` (`prompt`, `imageUrl`).

    Retour: `GenerateAuraResponse` avec une liste d'un seul élément.
    """
    if not payload.prompt or not payload.imageUrl:
        raise bad_request("Missing prompt or image URL")
    try:
        with observe_relay("generate"):
            result = await container.inference.generate(payload.prompt, payload.imageUrl)
    except ImageFetchError as err:
        raise internal_error("Failed to process uploaded image", err.message) from err
    except RelayError as err:
        log.error("generation_proxy_error", details=err.message)
        raise internal_error("Failed to generate aura", err.message) from err
    return GenerateAuraResponse(output=[result])
