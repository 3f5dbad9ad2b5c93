"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from futureflow.api.routes.auth_routes import router as auth_router
from futureflow.api.routes.profile_routes import router as profile_router
from futureflow.api.routes.goal_routes import router as goal_router
from futureflow.api.routes.career_routes import router as career_router
from futureflow.api.routes.opportunity_routes import router as opportunity_router
from futureflow.api.routes.resource_routes import router as resource_router
from futureflow.api.routes.training_routes import router as training_router
from futureflow.api.routes.progress_routes import router as progress_router
from futureflow.api.routes.dashboard_routes import router as dashboard_router
from futureflow.api.routes.admin_routes import router as admin_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(auth_router)
api_router.include_router(profile_router)
api_router.include_router(goal_router)
api_router.include_router(career_router)
api_router.include_router(opportunity_router)
api_router.include_router(resource_router)
api_router.include_router(training_router)
api_router.include_router(progress_router)
api_router.include_router(dashboard_router)
api_router.include_router(admin_router)
