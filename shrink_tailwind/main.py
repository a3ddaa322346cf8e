"""
Main application entry point - FastAPI app instance and configuration.
Run with: uvicorn shrink_tailwind.main:app --reload
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shrink_tailwind.core.config import settings
from shrink_tailwind.core.logging import configure_logging
from shrink_tailwind.routers import extract

configure_logging()

# ---------------------------------------------------------------------------
# CREATE FASTAPI APPLICATION
# ---------------------------------------------------------------------------
app = FastAPI(
    title=settings.APP_NAME,
    debug=settings.DEBUG,
    docs_url="/docs",
    redoc_url="/redoc",
)

# ---------------------------------------------------------------------------
# CORS MIDDLEWARE
# ---------------------------------------------------------------------------
# Editor plugins call the API from webviews with arbitrary origins.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# REGISTER ROUTERS
# ---------------------------------------------------------------------------
# extract.router: /tailwind/suggestions, /tailwind/categorize, /tailwind/extract
app.include_router(extract.router)


# ---------------------------------------------------------------------------
# HEALTH CHECK ENDPOINT
# ---------------------------------------------------------------------------
@app.get("/health", tags=["health"])
def health_check():
    """
    Simple health check endpoint.

    Returns:
        {"status": "ok"}
    """
    return {"status": "ok"}
