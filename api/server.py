"""FastAPI server for Virtual Try-On.

Receives requests from the try-on page with:
- personImage: Base64 data URL of the user's photo
- clothingImage: Base64 data URL of the garment
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from fitting_room import __version__
from fitting_room.config import load_config, setup_logging
from fitting_room.models import TryOnOutcome, TryOnRequest
from fitting_room.pipeline import TryOnPipeline


logger = logging.getLogger("fitting_room.api")

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}


# Initialize pipeline (will be done on first request)
_pipeline: TryOnPipeline | None = None


def get_pipeline() -> TryOnPipeline:
    """Get or create the pipeline instance."""
    global _pipeline
    if _pipeline is None:
        config = load_config()  # Loads from .env automatically via pydantic-settings
        setup_logging(config.log_level)
        _pipeline = TryOnPipeline(config)
    return _pipeline


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    if _pipeline is not None:
        await _pipeline.close()


app = FastAPI(
    title="Fitting Room API",
    description="Virtual try-on proxy for a multimodal AI gateway",
    version=__version__,
    lifespan=lifespan,
)

# Open to any origin; the page may be served from anywhere
@app.middleware("http")
async def cors(request: Request, call_next):
    """Answer every preflight with an empty body and stamp CORS headers on all responses."""
    if request.method == "OPTIONS":
        return Response(status_code=200, headers=CORS_HEADERS)
    response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response


def render_outcome(outcome: TryOnOutcome) -> JSONResponse:
    """Serialize any outcome into its status code and JSON body."""
    return JSONResponse(
        status_code=outcome.status_code,
        content=outcome.to_payload(),
        headers=CORS_HEADERS,
    )


def describe_validation_error(exc: ValidationError) -> str:
    """First pydantic error as a single line, e.g. 'personImage: Input should be a valid string'."""
    error = exc.errors()[0]
    location = ".".join(str(part) for part in error["loc"])
    return f"{location}: {error['msg']}" if location else error["msg"]


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "Virtual Try-On API", "version": __version__}


@app.get("/health")
async def health():
    """Detailed health check."""
    pipeline = get_pipeline()
    configured = bool(pipeline.config.gateway_api_key)

    return {
        "status": "ok" if configured else "degraded",
        "gateway": "configured" if configured else "missing credentials",
    }


@app.post("/virtual-tryon")
async def virtual_tryon(request: Request) -> JSONResponse:
    """Generate a virtual try-on image.

    Returns:
        200 with resultImage and message, or an error payload with
        400, 402, 429 or 500
    """
    try:
        body = await request.json()
        if not isinstance(body, dict):
            return render_outcome(TryOnOutcome.validation())

        tryon_request = TryOnRequest.model_validate(body)
        outcome = await get_pipeline().run(tryon_request)

    except ValidationError as e:
        outcome = TryOnOutcome.validation(describe_validation_error(e))

    except Exception as e:
        logger.exception("Error in virtual-tryon endpoint")
        outcome = TryOnOutcome.unexpected(e)

    return render_outcome(outcome)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
