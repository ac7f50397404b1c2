"""Constantes HTTP pour éviter les valeurs magiques dans le code.

Codes de statut et valeurs par défaut utilisés par les relais et le client.
"""

# Codes de statut HTTP courants
HTTP_OK = 200
HTTP_BAD_REQUEST = 400
HTTP_NOT_FOUND = 404
HTTP_PAYLOAD_TOO_LARGE = 413
HTTP_UNPROCESSABLE_ENTITY = 422
HTTP_INTERNAL_SERVER_ERROR = 500
HTTP_BAD_GATEWAY = 502
HTTP_SERVICE_UNAVAILABLE = 503

# Types MIME
DEFAULT_OUTPUT_MIME = "image/png"
UPLOAD_INPUT_MIME = "image/jpeg"

# Taille maximale acceptée pour un corps JSON contenant une image base64
MAX_BODY_BYTES = 50 * 1024 * 1024
