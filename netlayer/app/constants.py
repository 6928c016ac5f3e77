"""Network-layer constants shared across modules."""
from __future__ import annotations

SERVICE_NAME = "netlayer"

# Methods whose requests carry the router body. Only POST: PUT/PATCH bodies are dropped.
BODY_CARRYING_METHODS: frozenset[str] = frozenset({"POST"})

SUCCESS_STATUS_MIN = 200
SUCCESS_STATUS_MAX = 299

# Image responses are accepted below this status (1xx included).
IMAGE_STATUS_CEILING = 300
# Used when the transport gives back no status for an image response.
MISSING_STATUS_FALLBACK = 500

ERROR_BODY_MESSAGE_KEY = "message"
ERROR_BODY_USER_MESSAGE_KEY = "user_error_message"

DEFAULT_FALLBACK_ERROR_MESSAGE = "Algo salió mal."
ERROR_DOMAIN = "MLCardForm"
