import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from workhours.core.config import ServerConfig, ShiftFormConfig
from workhours.core.database import init_database, seed_test_data
from workhours.api.endpoints import general, shifts, history

# Configure logging
log_level = getattr(logging, ServerConfig.LOG_LEVEL.upper())
logging.basicConfig(level=log_level)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup logic
    logger.info("=" * 60)
    logger.info(f"{ServerConfig.APP_NAME.upper()}")
    logger.info(f"Version: {ServerConfig.APP_VERSION}")
    logger.info("=" * 60)

    init_database()

    # Add test data for development
    if ServerConfig.SEED_TEST_DATA:
        seed_test_data()

    logger.info(f"Database: {ServerConfig.DATABASE_PATH}")
    logger.info(f"Break options (min): {ShiftFormConfig.BREAK_MINUTE_OPTIONS}")
    logger.info("=" * 60)
    logger.info("Work Hours server started successfully!")

    yield  # Server is running

    logger.info("Shutting down Work Hours server...")


app = FastAPI(
    title=ServerConfig.APP_NAME,
    version=ServerConfig.APP_VERSION,
    description=ServerConfig.APP_DESCRIPTION,
    lifespan=lifespan,
    docs_url="/docs" if ServerConfig.ENABLE_API_DOCS else None,
    redoc_url="/redoc" if ServerConfig.ENABLE_API_DOCS else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ServerConfig.CORS_ORIGINS,
    allow_credentials=ServerConfig.CORS_ALLOW_CREDENTIALS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(general.router, tags=["General"])
app.include_router(shifts.router, tags=["Shifts"])
app.include_router(history.router, tags=["History"])
