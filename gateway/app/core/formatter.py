import logging
from typing import Dict
from gateway.app.core.cors import CorsPolicy
from gateway.app.core.invoker import PredictionResult
from gateway.app.core.response import GatewayResponse
from gateway.app.core.result import ErrorKind, GatewayError
from shared.schemas.inference import CompletionResponse, ErrorResponse

logger = logging.getLogger(__name__)


class ResponseFormatter:
    """Builds the success and error envelopes, always with the CORS headers."""

    def __init__(
        self,
        cors: CorsPolicy,
        not_found_status: int = 500,
        expose_error_details: bool = False,
    ) -> None:
        self._cors = cors
        self._status_by_kind: Dict[ErrorKind, int] = {
            ErrorKind.VALIDATION: 400,
            ErrorKind.NOT_FOUND: not_found_status,
            ErrorKind.UPSTREAM: 500,
        }
        self._expose_error_details = expose_error_details

    def success(self, result: PredictionResult) -> GatewayResponse:
        body = CompletionResponse(completion=result.completion_text, model=result.model_id)
        return GatewayResponse(
            status_code=200,
            body=body.model_dump(),
            headers=self._cors.response_headers(),
        )

    def failure(self, error: GatewayError) -> GatewayResponse:
        status_code = self._status_by_kind[error.kind]
        if error.kind is ErrorKind.VALIDATION:
            logger.warning(f"Request rejected ({error.kind.value}): {error.diagnostic}")
        else:
            logger.error(f"Request failed ({error.kind.value}): {error.diagnostic}")

        message = error.diagnostic if self._expose_error_details else error.message
        return GatewayResponse(
            status_code=status_code,
            body=ErrorResponse(error=message).model_dump(),
            headers=self._cors.response_headers(),
        )
