# ordermatch/main.py

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ordermatch.config import get_settings
from ordermatch.core.validation import MatchInputError
from ordermatch.routers import health, match

settings = get_settings()
logger = logging.getLogger(__name__)

# ============================================
# Create FastAPI app
# ============================================

app = FastAPI(
    title=settings.app_name,
    description="Fuzzy matching of purchase orders to payment transactions",
    version="1.0.0",
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)

# ============================================
# CORS middleware
# ============================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        settings.frontend_url,
        "http://localhost:3000",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ============================================
# Error handlers
# ============================================

@app.exception_handler(MatchInputError)
async def match_input_error_handler(request: Request, exc: MatchInputError):
    logger.warning(f"Bad matcher input on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=400,
        content={
            "error": exc.message,
            "kind": exc.kind.value,
            "statusCode": 400,
        },
    )

# ============================================
# Include routers
# ============================================

app.include_router(health.router, tags=["Health"])
app.include_router(match.router, tags=["Matching"])

# ============================================
# Root endpoint
# ============================================

@app.get("/")
async def root():
    return {
        "name": settings.app_name,
        "version": "1.0.0",
        "status": "running",
        "docs": "/docs" if settings.debug else None,
    }
