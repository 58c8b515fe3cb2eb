import pytest
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence
from gateway.app.core.backend import ModelEndpoint
from gateway.app.core.metrics import metrics


def make_endpoint(endpoint_id: str, display_name: str, created: str) -> ModelEndpoint:
    return ModelEndpoint(
        id=endpoint_id,
        display_name=display_name,
        create_time=datetime.fromisoformat(created).replace(tzinfo=timezone.utc),
    )


class FakeBackend:
    """In-memory ModelBackend that records every call."""

    def __init__(
        self,
        endpoints: Optional[Dict[str, List[ModelEndpoint]]] = None,
        predictions: Optional[List[Any]] = None,
        list_error: Optional[Exception] = None,
        predict_error: Optional[Exception] = None,
    ) -> None:
        self.endpoints = endpoints or {}
        self.predictions = predictions if predictions is not None else ["ok"]
        self.list_error = list_error
        self.predict_error = predict_error
        self.list_calls: List[str] = []
        self.predict_calls: List[Dict[str, Any]] = []

    def list_endpoints(self, display_name: str) -> Sequence[ModelEndpoint]:
        self.list_calls.append(display_name)
        if self.list_error:
            raise self.list_error
        return list(self.endpoints.get(display_name, []))

    def predict(
        self,
        endpoint: ModelEndpoint,
        instances: List[Dict[str, Any]],
        parameters: Dict[str, Any],
    ) -> List[Any]:
        self.predict_calls.append(
            {"endpoint": endpoint, "instances": instances, "parameters": parameters}
        )
        if self.predict_error:
            raise self.predict_error
        return list(self.predictions)

    @property
    def queried(self) -> bool:
        return bool(self.list_calls or self.predict_calls)


@pytest.fixture
def backend():
    return FakeBackend(
        endpoints={
            "gemma-2b-it": [make_endpoint("ep-default", "gemma-2b-it", "2024-03-01")],
            "X": [make_endpoint("ep-x", "X", "2024-01-15")],
        },
        predictions=["Q"],
    )


@pytest.fixture(autouse=True)
def reset_metrics():
    metrics.reset()
    yield
    metrics.reset()


@pytest.fixture
def endpoint_factory():
    return make_endpoint


@pytest.fixture
def backend_factory():
    return FakeBackend
