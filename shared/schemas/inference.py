from typing import Optional
from pydantic import BaseModel, Field, ConfigDict


class InferenceRequest(BaseModel):
    """Fully resolved generation request passed downstream of parameter resolution."""
    model_config = ConfigDict(extra="forbid", strict=True, frozen=True)

    prompt: str = Field(..., min_length=1, description="Input prompt text")
    max_tokens: int = Field(..., gt=0, description="Maximum tokens to generate")
    temperature: float = Field(..., allow_inf_nan=False, description="Sampling temperature")
    model_id: str = Field(..., min_length=1, description="Display name of the target model")


class GenerateRequest(BaseModel):
    """Wire body accepted by the gateway, used by clients to build requests."""
    model_config = ConfigDict(extra="forbid")

    prompt: str = Field(..., description="Input prompt text")
    max_tokens: Optional[int] = Field(default=None, description="Maximum tokens to generate")
    temperature: Optional[float] = Field(default=None, description="Sampling temperature")
    model_id: Optional[str] = Field(default=None, description="Display name of the target model")


class CompletionResponse(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True)

    completion: str = Field(..., description="Generated text")
    model: str = Field(..., description="Model identifier the request was resolved against")


class ErrorResponse(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True)

    error: str = Field(..., description="Human-readable error message")
