import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from explorer.config import settings
from explorer.core.errors import register_error_handlers
from explorer.core.middleware import AccessLogMiddleware, RequestIDMiddleware
from explorer.routers import objects

VERSION = "0.1.0"

logger = logging.getLogger("explorer")
logger.setLevel(settings.log_level.upper())

app = FastAPI(
    title=settings.app_name,
    version=VERSION,
    docs_url="/docs" if settings.docs_enabled else None,
    redoc_url="/redoc" if settings.docs_enabled else None,
)

# Middleware — order matters (last added = outermost = first to execute)
# CORS outermost so all responses get CORS headers, including errors
cors_kwargs = {
    "allow_origins": settings.cors_origins_list,
    "allow_credentials": True,
    "allow_methods": ["*"],
    "allow_headers": ["*"],
    "expose_headers": ["x-request-id"],
}
if settings.cors_allow_origin_regex:
    cors_kwargs["allow_origin_regex"] = settings.cors_allow_origin_regex
app.add_middleware(AccessLogMiddleware)
app.add_middleware(RequestIDMiddleware)
app.add_middleware(CORSMiddleware, **cors_kwargs)

# Error handlers
register_error_handlers(app)

# Routers
app.include_router(objects.router)


@app.get("/health")
async def health_check():
    return {"status": "ok", "app": settings.app_name, "version": VERSION}
