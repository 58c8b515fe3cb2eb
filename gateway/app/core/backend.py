import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Protocol, Sequence
from google.cloud import aiplatform

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ModelEndpoint:
    id: str
    display_name: str
    create_time: Optional[datetime]
    handle: Any = field(default=None, compare=False, repr=False)


class ModelBackend(Protocol):
    """The two backend operations the gateway depends on."""

    def list_endpoints(self, display_name: str) -> Sequence[ModelEndpoint]:
        """Endpoints with this display name, most recently created first."""
        ...

    def predict(
        self,
        endpoint: ModelEndpoint,
        instances: List[Dict[str, Any]],
        parameters: Dict[str, Any],
    ) -> List[Any]:
        ...


class VertexAIBackend:
    """ModelBackend over Vertex AI endpoints.

    Holds only immutable project/location/timeout values and passes them on
    every call, so one instance can be shared across requests.
    """

    def __init__(
        self,
        project: Optional[str],
        location: str,
        timeout_sec: Optional[float] = None,
    ) -> None:
        self._project = project
        self._location = location
        self._timeout_sec = timeout_sec

    def list_endpoints(self, display_name: str) -> Sequence[ModelEndpoint]:
        escaped = display_name.replace("\\", "\\\\").replace('"', '\\"')
        endpoints = aiplatform.Endpoint.list(
            filter=f'display_name="{escaped}"',
            order_by="create_time desc",
            project=self._project,
            location=self._location,
        )
        logger.debug(f"Found {len(endpoints)} endpoint(s) for display_name={display_name}")
        return [
            ModelEndpoint(
                id=endpoint.name,
                display_name=endpoint.display_name,
                create_time=endpoint.create_time,
                handle=endpoint,
            )
            for endpoint in endpoints
        ]

    def predict(
        self,
        endpoint: ModelEndpoint,
        instances: List[Dict[str, Any]],
        parameters: Dict[str, Any],
    ) -> List[Any]:
        response = endpoint.handle.predict(
            instances=instances,
            parameters=parameters,
            timeout=self._timeout_sec,
        )
        return list(response.predictions)
