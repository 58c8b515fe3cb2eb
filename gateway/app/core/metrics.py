import threading
from typing import Dict
from collections import defaultdict
import logging

logger = logging.getLogger(__name__)


class Metrics:
    """Prometheus-ready metrics abstraction."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._request_count: Dict[str, int] = defaultdict(int)
        self._error_count: Dict[str, int] = defaultdict(int)
        self._latency_sum: Dict[str, float] = defaultdict(float)
        self._latency_count: Dict[str, int] = defaultdict(int)
        self._prediction_latency_sum: float = 0.0
        self._prediction_count: int = 0

    def record_request(self, endpoint: str, status_code: int, latency_sec: float) -> None:
        """Record a request with status and latency."""
        with self._lock:
            self._request_count[f"{endpoint}_{status_code}"] += 1
            self._latency_sum[endpoint] += latency_sec
            self._latency_count[endpoint] += 1

    def record_error(self, kind: str) -> None:
        """Record a pipeline failure by error kind."""
        with self._lock:
            self._error_count[kind] += 1

    def record_prediction(self, latency_sec: float) -> None:
        """Record the duration of one backend prediction call."""
        with self._lock:
            self._prediction_latency_sum += latency_sec
            self._prediction_count += 1

    def get_metrics(self) -> Dict:
        """Get all metrics in Prometheus-ready format."""
        with self._lock:
            metrics: Dict = {
                "requests_total": dict(self._request_count),
                "errors_total": dict(self._error_count),
                "predictions_total": self._prediction_count,
            }

            avg_latencies: Dict[str, float] = {}
            for endpoint, total in self._latency_sum.items():
                count = self._latency_count.get(endpoint, 1)
                avg_latencies[f"{endpoint}_avg_seconds"] = total / count if count > 0 else 0.0

            metrics["latency_avg_seconds"] = avg_latencies
            metrics["prediction_latency_avg_seconds"] = (
                self._prediction_latency_sum / self._prediction_count
                if self._prediction_count > 0
                else 0.0
            )
            return metrics

    def reset(self) -> None:
        """Reset all metrics (for testing)."""
        with self._lock:
            self._request_count.clear()
            self._error_count.clear()
            self._latency_sum.clear()
            self._latency_count.clear()
            self._prediction_latency_sum = 0.0
            self._prediction_count = 0


metrics = Metrics()
