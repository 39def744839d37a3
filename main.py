from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn

from api.routes import router
from config import API_HOST, API_PORT, API_VERSION, MAX_BODY_BYTES


logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan events for startup and shutdown.

    Records live in memory only: nothing is loaded on startup and
    everything is discarded on shutdown.
    """
    print("🚀 Starting Employee Record API...")
    from models.store import get_employee_store
    print(f"✅ Employee store ready ({get_employee_store().count()} records)")

    yield  # Application runs here

    print("👋 Shutting down, in-memory records are discarded.")


# Create FastAPI app with lifespan
app = FastAPI(
    title="Employee Record API",
    description="""
    Employee Record Manager API

    Features:
    - List, create, update and delete employee records
    - Field validation shared with the form client
    - Inline (data URL) employee photos
    """,
    version=API_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)


@app.middleware("http")
async def limit_body_size(request: Request, call_next):
    """Reject request bodies above the inline-photo ceiling"""
    content_length = request.headers.get("content-length")
    if content_length and content_length.isdigit() and int(content_length) > MAX_BODY_BYTES:
        logger.warning("Rejected %s %s: body of %s bytes", request.method, request.url.path, content_length)
        return JSONResponse(status_code=413, content={"error": "Request body too large (max 10MB)."})
    return await call_next(request)


# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors as {"error": "..."}"""
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies are client errors, not schema errors"""
    return JSONResponse(status_code=400, content={"error": "Request body must be a JSON object."})


# Include API routes
app.include_router(router, prefix="/api", tags=["Employees"])


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "Employee Record API",
        "version": API_VERSION,
        "docs": "/docs",
        "health": "/api/health"
    }


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=API_HOST,
        port=API_PORT,
        reload=True
    )
