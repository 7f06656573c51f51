import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import text
from starlette.exceptions import HTTPException as StarletteHTTPException

from career_quiz import __version__
from career_quiz.cache.connection import close_redis
from career_quiz.core.config import admin_settings, database_settings, quiz_settings
from career_quiz.core.logging_config import setup_logging
from career_quiz.db.session import async_engine, db_session, init_models
from career_quiz.routers import admin as admin_router
from career_quiz.routers import quiz as quiz_router

# Configure logging VERY early
setup_logging(quiz_settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if database_settings.url.startswith("sqlite"):
        await init_models()
        logger.info("SQLite tables ensured")
    yield
    if admin_settings.token_backend == "redis":
        await close_redis()
    await async_engine.dispose()
    logger.info("Shutdown complete")


app = FastAPI(title="Career Interest Quiz API", version=__version__, lifespan=lifespan)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=quiz_settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request, exc: StarletteHTTPException):
    """Error bodies across the API are {"error": message}."""
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)


# --- Include Routers ---
app.include_router(quiz_router.router, prefix="/api", tags=["quiz"])
app.include_router(admin_router.router, prefix="/api/admin", tags=["admin"])


@app.get("/", tags=["Health Check"])
async def read_root():
    """
    Root endpoint for basic health check.
    """
    return {"status": "ok", "message": "Career Interest Quiz API is running.", "version": __version__}


@app.get("/health/db", tags=["Health Check"])
async def health_check_db(db: AsyncSession = Depends(db_session)):
    """
    Performs a database connection health check.
    """
    try:
        result = (await db.execute(text("SELECT 1"))).scalar_one()
        return {"status": "ok", "db_check": result}
    except SQLAlchemyError as e:
        logger.error(f"DB health check failed: {e}", exc_info=True)
        # Raise 503 Service Unavailable if DB connection fails
        raise HTTPException(status_code=503, detail="Database connection error")


if __name__ == "__main__":
    import uvicorn
    # Prefer `uvicorn main:app --reload` from the project root
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
