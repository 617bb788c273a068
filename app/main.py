import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.post import router as post_router
from app.config.logging_config import init_logging
from app.schemas.response import HealthResponse
from app.utils.errors import InvalidRequestError, PostGenerationError

init_logging()
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="AI Social Poster",
    description="Generate marketing post variants for social platforms",
    version="1.0.0"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(post_router, prefix="/api", tags=["posts"])


@app.exception_handler(PostGenerationError)
async def post_generation_error_handler(request: Request, exc: PostGenerationError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    logger.info(f"Rejected unreadable request body on {request.url.path}")
    error = InvalidRequestError(details="; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', '')}"
        for err in exc.errors()
    ))
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


@app.get("/api/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(ok=True, message="AI Social Poster API is running")
