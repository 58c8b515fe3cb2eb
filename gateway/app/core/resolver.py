import logging
from gateway.app.core.backend import ModelBackend, ModelEndpoint
from gateway.app.core.result import Err, GatewayError, Ok, Result

logger = logging.getLogger(__name__)


class ModelResolver:
    """Looks up the most recently created endpoint for a model display name."""

    def __init__(self, backend: ModelBackend) -> None:
        self._backend = backend

    def resolve(self, model_id: str) -> Result[ModelEndpoint]:
        try:
            endpoints = list(self._backend.list_endpoints(model_id))
        except Exception as e:
            logger.error(f"Endpoint lookup failed for model {model_id}: {e}", exc_info=True)
            return Err(GatewayError.upstream("Model lookup failed", detail=str(e)))

        if not endpoints:
            return Err(GatewayError.not_found(
                f"Model '{model_id}' was not found",
                detail=f"No endpoints with display_name={model_id}",
            ))

        endpoint = endpoints[0]
        logger.info(
            f"Resolved model {model_id} to endpoint {endpoint.id} "
            f"(created={endpoint.create_time}, candidates={len(endpoints)})"
        )
        return Ok(endpoint)
