import logging
import time
from dataclasses import dataclass
from typing import Any, Mapping, Optional
from gateway.app.core.backend import ModelBackend, ModelEndpoint
from gateway.app.core.metrics import metrics
from gateway.app.core.result import Err, GatewayError, Ok, Result
from shared.schemas.inference import InferenceRequest

logger = logging.getLogger(__name__)

# Keys under which model servers return generated text in dict predictions
TEXT_KEYS = ("content", "text", "generated_text")


@dataclass(frozen=True)
class PredictionResult:
    completion_text: str
    model_id: str


def extract_text(prediction: Any) -> Optional[str]:
    if isinstance(prediction, str):
        return prediction
    if isinstance(prediction, Mapping):
        for key in TEXT_KEYS:
            value = prediction.get(key)
            if isinstance(value, str):
                return value
    return None


class PredictionInvoker:
    """Issues exactly one prediction call per request; no retries."""

    def __init__(self, backend: ModelBackend) -> None:
        self._backend = backend

    def invoke(
        self, endpoint: ModelEndpoint, request: InferenceRequest
    ) -> Result[PredictionResult]:
        instances = [{"prompt": request.prompt}]
        parameters = {
            "maxOutputTokens": request.max_tokens,
            "temperature": request.temperature,
        }

        start_time = time.time()
        try:
            predictions = self._backend.predict(endpoint, instances, parameters)
        except Exception as e:
            logger.error(f"Prediction call to {endpoint.id} failed: {e}", exc_info=True)
            return Err(GatewayError.upstream("Prediction request failed", detail=str(e)))
        finally:
            metrics.record_prediction(time.time() - start_time)

        if not predictions:
            return Err(GatewayError.upstream(
                "Prediction request failed",
                detail=f"Endpoint {endpoint.id} returned no predictions",
            ))

        text = extract_text(predictions[0])
        if text is None:
            return Err(GatewayError.upstream(
                "Prediction request failed",
                detail=f"Unrecognized prediction type from {endpoint.id}: "
                f"{type(predictions[0]).__name__}",
            ))

        return Ok(PredictionResult(completion_text=text, model_id=request.model_id))
