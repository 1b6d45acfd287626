import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from tone_picker.api.routes import router
from tone_picker.config import settings
from tone_picker.services.adjust import ToneAdjustmentService
from tone_picker.services.ai import AIService
from tone_picker.services.cache import ResultCache

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    print("=" * 60)
    print("Application starting up...")
    print(f"Environment: {settings.environment}")
    print(f"Model: {settings.llm_model} at {settings.llm_base_url}")
    if settings.llm_api_key:
        print("✓ Model API key found in environment")
    else:
        print("⚠ Model API key NOT found in environment variables!")
    print(f"Allowed origins: {', '.join(settings.allowed_origins)}")
    print(f"Health check: http://localhost:{settings.port}/api/health")
    print("=" * 60)

    yield
    app.state.tone_service.cache.clear()


def _validation_message(exc: RequestValidationError) -> str:
    # Text is checked before coordinates, whichever field pydantic rejected
    body = exc.body
    if isinstance(body, dict):
        text = body.get("text")
        if not isinstance(text, str) or not text.strip():
            return "Text is required"
    for err in exc.errors():
        loc = err.get("loc", ())
        if "x" in loc or "y" in loc:
            return "Invalid tone coordinates"
        if "text" in loc:
            return "Text is required"
    return "Invalid request body"


def create_app(service: ToneAdjustmentService | None = None) -> FastAPI:
    if service is None:
        service = ToneAdjustmentService(
            cache=ResultCache(ttl_seconds=settings.cache_ttl_seconds),
            ai=AIService(settings),
            key_prefix_length=settings.cache_key_prefix_length,
        )

    app = FastAPI(
        title="Tone Picker API",
        description="Rewrite text in a tone picked from a 3x3 formality/register grid.",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.tone_service = service

    app.add_middleware(GZipMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(router)

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": _validation_message(exc)})

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        # A known path with the wrong method is still an unknown endpoint
        if exc.status_code in (404, 405):
            return JSONResponse(status_code=404, content={"error": "Endpoint not found"})
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": "Something went wrong!"})

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=settings.port)
