"""Request-handling pipeline for the text-generation gateway.

One call to :meth:`GenerationPipeline.handle` walks a single request through

    Validating -> Resolving-Parameters -> Resolving-Model -> Invoking

and ends in either Formatting-Success or Formatting-Error. Each stage returns a
``Result``; the first ``Err`` skips straight to error formatting. Preflight
requests are answered by the CORS policy before any stage runs.
"""
import logging
from enum import Enum
from typing import Optional, Union
from gateway.app.core.backend import ModelBackend
from gateway.app.core.config import Settings
from gateway.app.core.cors import CorsPolicy
from gateway.app.core.formatter import ResponseFormatter
from gateway.app.core.invoker import PredictionInvoker
from gateway.app.core.metrics import metrics
from gateway.app.core.parameters import GenerationDefaults, ParameterResolver
from gateway.app.core.resolver import ModelResolver
from gateway.app.core.response import GatewayResponse
from gateway.app.core.result import Err, GatewayError
from gateway.app.core.validation import RequestValidator

logger = logging.getLogger(__name__)


class Stage(str, Enum):
    VALIDATING = "validating"
    RESOLVING_PARAMETERS = "resolving-parameters"
    RESOLVING_MODEL = "resolving-model"
    INVOKING = "invoking"
    FORMATTING_SUCCESS = "formatting-success"
    FORMATTING_ERROR = "formatting-error"


class GenerationPipeline:
    def __init__(
        self,
        backend: ModelBackend,
        defaults: Optional[GenerationDefaults] = None,
        cors: Optional[CorsPolicy] = None,
        not_found_status: int = 500,
        expose_error_details: bool = False,
    ) -> None:
        self.cors = cors or CorsPolicy()
        self.validator = RequestValidator()
        self.parameters = ParameterResolver(defaults or GenerationDefaults())
        self.models = ModelResolver(backend)
        self.invoker = PredictionInvoker(backend)
        self.formatter = ResponseFormatter(
            self.cors,
            not_found_status=not_found_status,
            expose_error_details=expose_error_details,
        )

    @classmethod
    def from_settings(cls, backend: ModelBackend, settings: Settings) -> "GenerationPipeline":
        return cls(
            backend,
            defaults=GenerationDefaults.from_settings(settings),
            not_found_status=settings.not_found_status,
            expose_error_details=settings.expose_error_details and not settings.is_production(),
        )

    def handle(self, method: str, body: Optional[Union[bytes, str]]) -> GatewayResponse:
        preflight = self.cors.preflight(method)
        if preflight is not None:
            logger.debug("Answered CORS preflight")
            return preflight

        self._enter(Stage.VALIDATING)
        validated = self.validator.validate(body)
        if isinstance(validated, Err):
            return self._fail(validated.error)
        draft, options = validated.value

        self._enter(Stage.RESOLVING_PARAMETERS)
        resolved = self.parameters.resolve(draft, options)
        if isinstance(resolved, Err):
            return self._fail(resolved.error)
        request = resolved.value

        self._enter(Stage.RESOLVING_MODEL)
        endpoint = self.models.resolve(request.model_id)
        if isinstance(endpoint, Err):
            return self._fail(endpoint.error)

        self._enter(Stage.INVOKING)
        prediction = self.invoker.invoke(endpoint.value, request)
        if isinstance(prediction, Err):
            return self._fail(prediction.error)

        self._enter(Stage.FORMATTING_SUCCESS)
        logger.info(
            f"Completed generation: model={request.model_id} "
            f"completion_length={len(prediction.value.completion_text)}"
        )
        return self.formatter.success(prediction.value)

    def _enter(self, stage: Stage) -> None:
        logger.debug(f"Pipeline stage: {stage.value}")

    def _fail(self, error: GatewayError) -> GatewayResponse:
        self._enter(Stage.FORMATTING_ERROR)
        metrics.record_error(error.kind.value)
        return self.formatter.failure(error)
