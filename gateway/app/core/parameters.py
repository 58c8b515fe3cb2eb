from dataclasses import dataclass
from typing import Any, Mapping, Optional
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from gateway.app.core.config import Settings
from gateway.app.core.result import Err, GatewayError, Ok, Result
from gateway.app.core.validation import RequestDraft
from shared.schemas.inference import InferenceRequest


@dataclass(frozen=True)
class GenerationDefaults:
    max_tokens: int = 4000
    temperature: float = 0.7
    model_id: str = "gemma-2b-it"

    @classmethod
    def from_settings(cls, settings: Settings) -> "GenerationDefaults":
        return cls(
            max_tokens=settings.default_max_tokens,
            temperature=settings.default_temperature,
            model_id=settings.default_model_id,
        )


class GenerationOptions(BaseModel):
    """Shape check for the optional request fields; unknown keys are ignored."""
    model_config = ConfigDict(extra="ignore", strict=True)

    max_tokens: Optional[int] = Field(default=None, gt=0)
    temperature: Optional[float] = Field(default=None, allow_inf_nan=False)
    model_id: Optional[str] = Field(default=None, min_length=1)


class ParameterResolver:
    def __init__(self, defaults: GenerationDefaults) -> None:
        self._defaults = defaults

    def resolve(
        self, draft: RequestDraft, options: Mapping[str, Any]
    ) -> Result[InferenceRequest]:
        try:
            parsed = GenerationOptions.model_validate(dict(options))
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first["loc"])
            return Err(GatewayError.validation(f"Invalid '{field}': {first['msg']}"))

        return Ok(InferenceRequest(
            prompt=draft.prompt,
            max_tokens=parsed.max_tokens if parsed.max_tokens is not None else self._defaults.max_tokens,
            temperature=(
                float(parsed.temperature)
                if parsed.temperature is not None
                else self._defaults.temperature
            ),
            model_id=parsed.model_id if parsed.model_id is not None else self._defaults.model_id,
        ))
