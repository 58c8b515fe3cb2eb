import requests
from typing import Optional
from shared.schemas.inference import CompletionResponse, GenerateRequest


class GatewayRequestError(Exception):
    """Raised when the gateway answers with a non-2xx status."""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"Gateway returned {status_code}: {message}")
        self.status_code = status_code
        self.message = message


class GatewayClient:
    def __init__(self, base_url: str, timeout: int = 60):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()

    def health_check(self) -> bool:
        try:
            response = self.session.get(
                f"{self.base_url}/health",
                timeout=self.timeout
            )
            response.raise_for_status()
            return response.json().get("status") == "ok"
        except (requests.exceptions.RequestException, ValueError):
            return False

    def generate(
        self,
        prompt: str,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
        model_id: Optional[str] = None,
    ) -> CompletionResponse:
        request_data = GenerateRequest(
            prompt=prompt,
            max_tokens=max_tokens,
            temperature=temperature,
            model_id=model_id,
        )

        try:
            response = self.session.post(
                f"{self.base_url}/",
                json=request_data.model_dump(exclude_none=True),
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout:
            raise TimeoutError(f"Request timed out after {self.timeout} seconds")
        except requests.exceptions.RequestException as e:
            raise ConnectionError(f"Request failed: {str(e)}")

        if not response.ok:
            try:
                message = response.json().get("error", response.text)
            except ValueError:
                message = response.text
            raise GatewayRequestError(response.status_code, message)

        return CompletionResponse(**response.json())
