from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from config import Settings, settings as default_settings
from database import MongoConnection
from auth.routes import router as auth_router
from doctor.routes import router as doctor_router
from appointment.routes import router as appointment_router
from typing import Optional
import logging

logging.basicConfig(level=default_settings.log_level)
logger = logging.getLogger(__name__)


def _validation_message(exc: RequestValidationError) -> str:
    for error in exc.errors():
        if error["type"] in ("missing", "string_too_short"):
            return "Missing required fields"
    return "Invalid request data"


def create_app(settings: Optional[Settings] = None, mongo_client=None) -> FastAPI:
    settings = settings or default_settings

    app = FastAPI(title="Dental Clinic API")
    app.state.settings = settings
    app.state.db = MongoConnection(
        settings.mongodb_uri, settings.mongodb_db, client=mongo_client
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"message": _validation_message(exc)})

    @app.exception_handler(Exception)
    async def internal_error_handler(request: Request, exc: Exception):
        logger.error("%s %s failed", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"message": "Server error"})

    @app.on_event("startup")
    async def startup():
        # Serverless deployments connect on the first request instead
        if not settings.lazy_connect:
            try:
                await app.state.db.connect()
            except Exception:
                logger.exception("MongoDB connection error")

    @app.on_event("shutdown")
    async def shutdown():
        app.state.db.close()

    @app.get("/")
    async def root():
        return "Hello"

    app.include_router(auth_router, tags=["auth"])
    app.include_router(doctor_router, tags=["doctor"])
    app.include_router(appointment_router, tags=["appointment"])

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000)
