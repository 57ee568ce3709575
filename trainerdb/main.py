"""
Trainer Repository Application - FastAPI Entry Point

This module serves as the main entry point for the FastAPI application,
providing REST API endpoints over the trainer repository.
"""

from datetime import datetime, timezone
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from trainerdb.api.dependencies import get_connection_manager
from trainerdb.api.routes import trainers
from trainerdb.config.settings import configure_logging, get_settings
from trainerdb.config.database import (
    DatabaseConnectionManager, close_database, create_client, init_database
)

# Initialize settings
settings = get_settings()
configure_logging(settings)

# Create FastAPI application instance
app = FastAPI(
    title=settings.app_name,
    description="REST API for storing and retrieving trainers in MongoDB",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Application startup event
@app.on_event("startup")
async def startup_event():
    """Create the MongoDB client and initialize the trainer collection."""
    app.state.mongo_client = create_client(settings)
    app.state.connection_manager = DatabaseConnectionManager(app.state.mongo_client, settings)
    await init_database(app.state.mongo_client, settings)

# Application shutdown event
@app.on_event("shutdown")
async def shutdown_event():
    """Clean up resources on application shutdown."""
    await close_database(app.state.mongo_client)

# Configure CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(trainers.router, prefix="/api/v1", tags=["trainers"])


@app.get("/")
async def root():
    """Root endpoint providing basic API information."""
    return {
        "message": settings.app_name,
        "version": "1.0.0",
        "status": "running"
    }

@app.get("/health")
async def health_check(
    connection_manager: DatabaseConnectionManager = Depends(get_connection_manager)
):
    """Health check endpoint for monitoring system status."""
    health_info = await connection_manager.health_check()

    return {
        "status": "healthy" if health_info["status"] == "healthy" else "degraded",
        "database": {
            "status": health_info["status"],
            "info": health_info.get("database_info") or {},
            "error": health_info.get("error")
        }
    }


@app.get("/health/database")
async def database_health_check(
    connection_manager: DatabaseConnectionManager = Depends(get_connection_manager)
):
    """Detailed database health check endpoint."""
    health_info = await connection_manager.health_check()
    crud_results = await connection_manager.test_crud_operations()

    return {
        "health_check": health_info,
        "crud_test": crud_results,
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


def run():
    """Serve the API with uvicorn."""
    import uvicorn
    uvicorn.run(
        "trainerdb.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    run()
