"""
FutureFlow - Main Application

FastAPI backend with:
- Relational database (PostgreSQL in production, SQLite for local runs)
- Session-cookie authentication with student/admin roles
- Career recommendations and a student leaderboard
- Single-page frontend served from /frontend

Run: uvicorn futureflow.main:app --reload
"""

import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.responses import FileResponse

from futureflow.api.routes import api_router
from futureflow.core.config import get_settings
from futureflow.core.errors import register_exception_handlers
from futureflow.core.logging_config import configure_logging
from futureflow.db.schema import init_db

settings = get_settings()
configure_logging()
logger = logging.getLogger("futureflow.main")

# Get the project root directory
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
FRONTEND_DIR = os.path.join(PROJECT_ROOT, "frontend", "public")

# Create FastAPI app
app = FastAPI(
    title="FutureFlow",
    description="""
    Student career-planning platform.

    ## Features
    - **Authentication**: session cookie; students self-register, admins are seeded
    - **Profiles & Goals**: skills, GPA, SMART goals with progress
    - **Catalog**: careers, opportunities, resources, training programs (admin-managed)
    - **Recommendations**: skill-overlap career matching
    - **Ranking**: composite-score student leaderboard
    - **Admin**: student list, profiles and analytics
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Cookies need explicit origins, "*" is not allowed with credentials
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include API routes
app.include_router(api_router, prefix="/api")

# Serve static files (for any additional assets)
if os.path.exists(FRONTEND_DIR):
    app.mount("/static", StaticFiles(directory=FRONTEND_DIR), name="static")


# Startup event
@app.on_event("startup")
async def startup_event():
    """Create missing tables on startup."""
    init_db()
    logger.info("Database schema ready")


# Serve the frontend for root path
@app.get("/", tags=["Frontend"])
async def serve_frontend():
    """Serve the single-page frontend."""
    index_path = os.path.join(FRONTEND_DIR, "index.html")
    if os.path.exists(index_path):
        return FileResponse(index_path)
    return {"status": "healthy", "app": "FutureFlow", "message": "Frontend not found. API is running."}


@app.get("/health", tags=["Health"])
async def health_check():
    """Detailed health check."""
    from futureflow.db.database import test_database_connection

    return {
        "status": "healthy",
        "database": "connected" if test_database_connection() else "disconnected",
    }
