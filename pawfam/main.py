# pawfam/main.py
from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pawfam.core.config import get_settings
from pawfam.core.errors import AppError
from pawfam.database import create_db_and_tables

# Import models so SQLModel metadata is populated before create_all()
from pawfam.models import user as _user_models  # noqa: F401
from pawfam.models import profile as _profile_models  # noqa: F401
from pawfam.models import adoption as _adoption_models  # noqa: F401
from pawfam.models import daycare as _daycare_models  # noqa: F401

# Routers
from pawfam.routers.auth import router as auth_router
from pawfam.routers.profile import router as profile_router
from pawfam.routers.adoption import router as adoption_router
from pawfam.routers.vendor_adoption import router as vendor_adoption_router
from pawfam.routers.daycare import router as daycare_router
from pawfam.routers.dashboard import router as dashboard_router

settings = get_settings()

logging.basicConfig(level=settings.LOG_LEVEL.upper())
logger = logging.getLogger("uvicorn")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup:
      - Verify DB connectivity and create tables.
    """
    logger.info("Startup: connecting to database...")
    try:
        create_db_and_tables()
        logger.info("Startup: DB connection OK, tables verified.")
    except Exception as e:
        logger.error(f"Startup: DB connection FAILED: {e}")
        raise
    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- Error rendering ---


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed or missing input is a 400 with the offending fields listed."""
    errors = [
        {
            "field": ".".join(str(part) for part in err["loc"] if part != "body"),
            "message": err["msg"],
        }
        for err in exc.errors()
    ]
    first = errors[0] if errors else {"field": "", "message": "Invalid request"}
    message = f"{first['field']}: {first['message']}" if first["field"] else first["message"]
    return JSONResponse(status_code=400, content={"message": message, "errors": errors})


app.include_router(auth_router, prefix=settings.API_PREFIX)
app.include_router(profile_router, prefix=settings.API_PREFIX)
app.include_router(adoption_router, prefix=settings.API_PREFIX)
app.include_router(vendor_adoption_router, prefix=settings.API_PREFIX)
app.include_router(daycare_router, prefix=settings.API_PREFIX)
app.include_router(dashboard_router, prefix=settings.API_PREFIX)


@app.get("/")
def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "pawfam-backend"}
