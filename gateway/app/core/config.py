from pydantic_settings import BaseSettings
from typing import Optional
import os

DEFAULT_LOCATION = "us-central1"


class Settings(BaseSettings):
    app_name: str = "Text Generation Gateway"
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"
    environment: str = "dev"

    # Vertex AI
    project_id: Optional[str] = None
    location: Optional[str] = None
    request_timeout_sec: int = 60

    # Generation defaults
    default_model_id: str = "gemma-2b-it"
    default_max_tokens: int = 4000
    default_temperature: float = 0.7

    # Error responses
    not_found_status: int = 500
    expose_error_details: bool = False

    class Config:
        env_file = ".env"
        case_sensitive = False

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        # Platform-provided names take effect when the gateway's own are unset
        if self.project_id is None:
            project = os.getenv("GOOGLE_CLOUD_PROJECT") or os.getenv("GCP_PROJECT")
            if project:
                object.__setattr__(self, "project_id", project)
        if self.location is None:
            location = os.getenv("REGION") or os.getenv("GOOGLE_CLOUD_LOCATION")
            object.__setattr__(self, "location", location or DEFAULT_LOCATION)

    def is_production(self) -> bool:
        return self.environment.lower() in ("prod", "production")


settings = Settings()
