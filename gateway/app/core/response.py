from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class GatewayResponse:
    """Framework-neutral response produced by the pipeline."""
    status_code: int
    body: Optional[Dict[str, Any]] = None
    headers: Dict[str, str] = field(default_factory=dict)
