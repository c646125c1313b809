import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from datetime import datetime, timezone

from app.config import ALLOWED_ORIGINS, setup_logging
from app.middleware.error_handler import traceback_exception_handler, validation_exception_handler
from app.routes import calculator
from services.error_types import ValidationError

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Cooling Load Calculator API",
    version="1.0.0",
    description="Room AC sizing from a simplified ASHRAE heat-load estimate"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
    allow_credentials=True,
)

app.add_exception_handler(ValidationError, validation_exception_handler)
app.add_exception_handler(Exception, traceback_exception_handler)


# Request logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info(f"REQUEST: {request.method} {request.url}")
    response = await call_next(request)
    logger.info(f"RESPONSE: {response.status_code}")
    return response


app.include_router(calculator.router, prefix="/api/v1/calculator")


@app.get("/")
async def root():
    return {"message": "Cooling Load Calculator API is running"}


@app.get("/health")
async def health():
    return {"status": "healthy"}


@app.get("/healthz")
async def healthz():
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": "cooling-load-calculator"
    }
