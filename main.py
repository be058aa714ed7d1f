from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from framework.config import settings
from framework.database.manager import DatabaseManager
from framework.middleware.logging_md import LoggingMiddleware
from framework.logging.logger import LogConfig
from framework.exceptions.handler import BusinessException, global_exception_handler
from apps.catalog.mapping import CatalogMapper
from apps.catalog.api.categories import router as categories_router
from apps.catalog.api.products import router as products_router
from apps.identity.api.router import router as identity_router
import apps.models  # noqa: F401  register tables on SQLModel.metadata


@asynccontextmanager
async def lifespan(app: FastAPI):
    db = DatabaseManager.get_instance()
    if settings.DB_CREATE_TABLES:
        await db.sql.create_all()
    yield
    await db.sql.disconnect()


app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan
)

# Initialize logging configuration
LogConfig.setup_logging()

# Entity <-> DTO mapper, read-only after startup; injected via get_mapper
app.state.mapper = CatalogMapper()

# Register global exception handlers
app.add_exception_handler(BusinessException, global_exception_handler)
app.add_exception_handler(RequestValidationError, global_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)

app.add_middleware(LoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Pagination", "X-Trace-ID"],
)

# Mount routers (prefix from config for easy override)
app.include_router(
    identity_router,
    prefix=settings.API_AUTH_PREFIX,
    tags=["Auth"]
)

app.include_router(
    categories_router,
    prefix=settings.API_CATEGORIES_PREFIX,
    tags=["Categories"]
)

app.include_router(
    products_router,
    prefix=settings.API_PRODUCTS_PREFIX,
    tags=["Products"]
)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
