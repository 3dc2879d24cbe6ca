import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from .config import CORS_ORIGINS, LOG_LEVEL
from .database import create_tables
from .exceptions import (
    TaskServiceError,
    task_service_exception_handler,
    validation_exception_handler,
)
from .routers import tasks

# Configure logging
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables on startup."""
    logger.info(f"Starting Task Tracker API, CORS origins: {CORS_ORIGINS}")
    create_tables()
    yield
    logger.info("Shutting down Task Tracker API")


# Create FastAPI app
app = FastAPI(
    title="Task Tracker API",
    description="Create, read, update and delete tasks owned by users",
    version="1.0.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register exception handlers
app.add_exception_handler(TaskServiceError, task_service_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)

# Include routers
app.include_router(tasks.router, prefix="/tasks", tags=["tasks"])


@app.get("/")
def read_root():
    return {"message": "Task Tracker API"}


@app.get("/health")
def health_check():
    return {"status": "healthy"}
