import logging
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response
from gateway.app.core.pipeline import GenerationPipeline
from gateway.app.core.response import GatewayResponse
from shared.schemas.inference import ErrorResponse

logger = logging.getLogger(__name__)
router = APIRouter()


def _to_http(result: GatewayResponse) -> Response:
    if result.body is None:
        return Response(status_code=result.status_code, headers=result.headers)
    return JSONResponse(
        content=result.body,
        status_code=result.status_code,
        headers=result.headers,
    )


@router.api_route("/", methods=["POST", "OPTIONS"])
async def generate(http_request: Request) -> Response:
    """Single generation endpoint; OPTIONS is answered as a CORS preflight."""
    pipeline: GenerationPipeline = http_request.app.state.pipeline
    body = await http_request.body()

    try:
        # The prediction call blocks, so keep it off the event loop
        result = await run_in_threadpool(pipeline.handle, http_request.method, body)
    except Exception as e:
        logger.error(f"Unhandled error in generation pipeline: {e}", exc_info=True)
        return JSONResponse(
            content=ErrorResponse(error="Internal server error").model_dump(),
            status_code=500,
            headers=pipeline.cors.response_headers(),
        )

    return _to_http(result)


async def http_error_handler(http_request: Request, exc: StarletteHTTPException) -> Response:
    """Framework errors (unknown path, unsupported method) in the gateway's error envelope."""
    pipeline: GenerationPipeline = http_request.app.state.pipeline
    headers = dict(exc.headers or {})
    headers.update(pipeline.cors.response_headers())
    return JSONResponse(
        content=ErrorResponse(error=str(exc.detail)).model_dump(),
        status_code=exc.status_code,
        headers=headers,
    )
