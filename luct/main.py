import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import text
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.cors import CORSMiddleware

from luct.api import auth_api, class_api, course_api, report_api, system_api, user_api
from luct.configs import settings
from luct.configs.database import engine, init_db
from luct.configs.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.LOG_LEVEL)
    # An unreachable database does not stop the server, requests fail with 500 until it is back
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        logger.info("Connected to the database successfully")
    except SQLAlchemyError as e:
        logger.exception(f"Database connection failed: {e}")
    try:
        init_db()
    except SQLAlchemyError as e:
        logger.exception(f"Could not create database tables: {e}")
    yield

app = FastAPI(title="LUCT Reporting System API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,  # Allowed origins
    allow_credentials=True,  # Allow cookies/auth headers
    allow_methods=["*"],  # Allow all HTTP methods
    allow_headers=["*"],  # Allow all headers
)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    fields = []
    for error in exc.errors():
        # loc is ("body", "<field>") for body fields, ("path", "<param>") for ids
        name = str(error["loc"][-1]) if error.get("loc") else "request"
        if name not in fields:
            fields.append(name)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": f"Invalid value for fields: {', '.join(fields)}"},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


# Include routers
app.include_router(system_api.router)
app.include_router(auth_api.router)
app.include_router(user_api.router)
app.include_router(class_api.router)
app.include_router(report_api.router)
app.include_router(course_api.router)


def run():
    import uvicorn

    setup_logging(settings.LOG_LEVEL)
    logger.info(f"Server running on http://{settings.HOST}:{settings.PORT}")
    uvicorn.run("luct.main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)


if __name__ == "__main__":
    run()
