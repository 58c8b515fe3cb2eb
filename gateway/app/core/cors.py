from typing import Dict, Optional
from gateway.app.core.response import GatewayResponse

PREFLIGHT_METHOD = "OPTIONS"


class CorsPolicy:
    """Answers browser preflight probes and supplies the allow-origin header."""

    def __init__(
        self,
        allow_origin: str = "*",
        allow_methods: str = "POST",
        allow_headers: str = "Content-Type",
        max_age_sec: int = 3600,
    ) -> None:
        self._allow_origin = allow_origin
        self._allow_methods = allow_methods
        self._allow_headers = allow_headers
        self._max_age_sec = max_age_sec

    def preflight(self, method: str) -> Optional[GatewayResponse]:
        """Return the terminal 204 response for a preflight, otherwise None."""
        if method.upper() != PREFLIGHT_METHOD:
            return None
        headers = self.response_headers()
        headers.update({
            "Access-Control-Allow-Methods": self._allow_methods,
            "Access-Control-Allow-Headers": self._allow_headers,
            "Access-Control-Max-Age": str(self._max_age_sec),
        })
        return GatewayResponse(status_code=204, body=None, headers=headers)

    def response_headers(self) -> Dict[str, str]:
        return {"Access-Control-Allow-Origin": self._allow_origin}
