from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging

from app.api import campaigns
from app.core.config import settings
from app.core.exceptions import CampaignServiceError, InternalFailure

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="[%(asctime)s] %(levelname)s in %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Campaign OTP Registration API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_allowed_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(CampaignServiceError)
async def campaign_service_error_handler(request: Request, exc: CampaignServiceError):
    """Expected outcomes (missing field, duplicate, expired code, ...) with their status code"""
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    logger.info(f"Rejected malformed request to {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"detail": "Invalid request body"})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Log the failure in full; tell the caller nothing about internals"""
    logger.exception(f"Unhandled exception on {request.method} {request.url.path}")
    failure = InternalFailure()
    response = JSONResponse(status_code=failure.status_code, content={"detail": failure.detail})

    # This handler runs outside CORSMiddleware, so add the headers manually
    origin = request.headers.get("origin")
    if origin and origin in settings.get_allowed_origins():
        response.headers["Access-Control-Allow-Origin"] = origin
        response.headers["Access-Control-Allow-Credentials"] = "true"

    return response


app.include_router(campaigns.router, prefix="/campaigns", tags=["campaigns"])


@app.get("/")
async def root():
    return {"message": "Campaign OTP Registration API", "version": "1.0.0"}


@app.get("/health")
async def health():
    return {"status": "healthy"}
