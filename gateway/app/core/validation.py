import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Union
from gateway.app.core.result import Err, GatewayError, Ok, Result

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestDraft:
    """Validated request before defaults are applied; carries only the prompt."""
    prompt: str


class RequestValidator:
    def validate(
        self, body: Optional[Union[bytes, str]]
    ) -> Result[Tuple[RequestDraft, Dict[str, Any]]]:
        """Parse the raw body and check for a non-empty ``prompt``.

        On success returns the draft together with the parsed payload so the
        parameter stage can read the optional fields.
        """
        size = len(body) if body else 0
        logger.debug(f"Validating request body (bytes={size})")

        if not body or not body.strip():
            return Err(GatewayError.validation("Request body is required"))

        try:
            payload = json.loads(body)
        except (ValueError, UnicodeDecodeError, RecursionError):
            return Err(GatewayError.validation("Request body must be valid JSON"))

        if not isinstance(payload, dict):
            return Err(GatewayError.validation("Request body must be a JSON object"))

        prompt = payload.get("prompt")
        if not isinstance(prompt, str) or not prompt:
            return Err(GatewayError.validation("'prompt' is required and must be a non-empty string"))

        return Ok((RequestDraft(prompt=prompt), payload))
