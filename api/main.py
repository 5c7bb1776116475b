"""
FastAPI application for the Book Catalog API.

Serves the GraphQL endpoint over an in-memory book catalog.

Responsibility: Main API application setup and configuration
"""

# Load .env BEFORE importing settings (critical for pydantic-settings)
from dotenv import load_dotenv
load_dotenv('.env', override=True)

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from strawberry.fastapi import GraphQLRouter
import logging

from src.config import settings
from src.db.repositories import BookRepository
from api.graphql import schema

# Configure logging
logging.basicConfig(
    level=settings.app.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


def build_repository() -> BookRepository:
    """Create the catalog store, seeded unless disabled in config."""
    if settings.catalog.seed_books:
        return BookRepository()
    return BookRepository(books=[])


# Create FastAPI app
app = FastAPI(
    title=settings.app.app_name,
    description="GraphQL API for an in-memory book catalog",
    version=settings.app.app_version,
    docs_url="/docs",
    redoc_url="/redoc"
)

# One store per process, handed to resolvers through the GraphQL context
app.state.book_repository = build_repository()

logger.info(f"CORS Origins configured: {settings.app.cors_origins}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.app.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
    max_age=3600,
)


@app.on_event("startup")
async def startup_event():
    """Log configuration on startup"""
    logger.info(f"Starting {settings.app.app_name}...")
    logger.info(f"Environment: {settings.app.environment.value}")
    logger.info(f"Debug mode: {settings.app.debug}")
    logger.info(f"Catalog holds {app.state.book_repository.count()} books")


@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on shutdown"""
    logger.info(f"Shutting down {settings.app.app_name}...")


@app.get("/")
async def root():
    """Root endpoint - API information."""
    return {
        "name": settings.app.app_name,
        "version": settings.app.app_version,
        "status": "operational",
        "endpoints": {
            "graphql": "/graphql",
            "health": "/health",
            "docs": "/docs"
        }
    }


@app.get("/health")
async def health_check(request: Request):
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "service": "book-catalog-api",
        "books": request.app.state.book_repository.count()
    }


# Exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler."""
    logger.error(f"Unhandled exception: {str(exc)}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "detail": str(exc) if settings.app.debug else "An unexpected error occurred"
        }
    )


async def get_context(request: Request):
    """Context for GraphQL requests"""
    return {"request": request, "repository": request.app.state.book_repository}


graphql_app = GraphQLRouter(
    schema,
    context_getter=get_context,
    graphiql=settings.app.graphiql_enabled
)
app.include_router(graphql_app, prefix="/graphql")
logger.info("GraphQL endpoint mounted at /graphql")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api.main:app",
        host=settings.app.api_host,
        port=settings.app.api_port,
        reload=True
    )
