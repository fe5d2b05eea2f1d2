import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Import routers
from app.api.routes import shops, products
from app.core import config
from app.core.exceptions import ForeignKeyViolation, NotFoundError, ShopApiException, ValidationError
from app.core.logging_config import RequestLoggingMiddleware, setup_logging
from app.db.init_db import init_db
from app.utils.helpers import message_response, validation_error_response

setup_logging(config.LOG_LEVEL, json_format=config.LOG_JSON)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("Database ready")
    yield


app = FastAPI(
    title="Shop & Product API",
    description="REST API for shops and their products",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(RequestLoggingMiddleware)


# Root route
@app.get("/", response_class=PlainTextResponse)
def root():
    return "Shop and Product API is running!"


# Include routers
app.include_router(shops.router, prefix="/shops", tags=["Shops"])
app.include_router(products.router, prefix="/products", tags=["Products"])


@app.exception_handler(ValidationError)
@app.exception_handler(ForeignKeyViolation)
async def validation_exception_handler(request: Request, exc: ShopApiException):
    return JSONResponse(status_code=exc.status_code, content=validation_error_response(exc.errors))


@app.exception_handler(NotFoundError)
async def not_found_exception_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content=message_response(exc.message))


@app.exception_handler(ShopApiException)
async def shop_api_exception_handler(request: Request, exc: ShopApiException):
    # StorageFailure and anything else unexpected: log it, never leak it
    logger.error("%s: %s", type(exc).__name__, exc.message, extra={"details": exc.details}, exc_info=exc)
    return JSONResponse(status_code=exc.status_code, content=message_response("Server error"))


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content=message_response(exc.detail))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content=message_response("Server error"))


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host=config.HOST, port=config.PORT, reload=not config.IS_PRODUCTION)
