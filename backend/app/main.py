from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from .core.database import create_db_and_tables
from .core.errors import StorageError
from .core.keys import get_signing_key_provider
from .core.logging import configure_logging, get_logger
from .core.settings import settings
from .models.User import User # Import models to register them with SQLModel
from .models.AuthToken import TokenRecord
from .models.Product import Product

from .auth.router import router as auth_router
from .users.router import router as users_router
from .products.router import router as products_router

logger = get_logger("app.main")

@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.LOG_LEVEL)
    # Fails with ConfigurationError before serving anything if the secret is missing.
    get_signing_key_provider().resolve()
    create_db_and_tables()
    logger.info("startup_complete", project=settings.PROJECT_NAME)
    yield



app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)

app.include_router(auth_router)
app.include_router(users_router)
app.include_router(products_router)

@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    logger.error("storage_error", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Token storage unavailable"},
    )

@app.get("/")
def read_root():
    return {"message": f"Welcome to {settings.PROJECT_NAME}"}
