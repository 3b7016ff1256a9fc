import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from teamfeed.config import settings
from teamfeed.core.exceptions import ErrorKind, TeamFeedError
from teamfeed.modules.auth import routes as auth_routes
from teamfeed.modules.profiles import routes as profiles_routes
from teamfeed.modules.posts import routes as posts_routes
from teamfeed.modules.follows import routes as follows_routes
from teamfeed.modules.feed import routes as feed_routes
from teamfeed.modules.teams import routes as teams_routes
from teamfeed.modules.dashboard import routes as dashboard_routes

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ErrorKind.EMPTY_CONTENT: 400,
    ErrorKind.CONTENT_TOO_LONG: 400,
    ErrorKind.SELF_FOLLOW_REJECTED: 400,
    ErrorKind.UNAUTHENTICATED: 401,
    ErrorKind.PROFILE_NOT_FOUND: 404,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.ALREADY_FOLLOWING: 409,
    ErrorKind.STORE_ERROR: 503,
}

app = FastAPI(
    title=settings.app_name,
    debug=settings.debug,
    redirect_slashes=False,
)


@app.exception_handler(TeamFeedError)
async def feed_error_handler(request: Request, exc: TeamFeedError):
    status_code = ERROR_STATUS.get(exc.kind, 500)
    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "code": exc.kind.value},
        headers=headers,
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception: %s", exc)
    if settings.is_production:
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})
    return JSONResponse(status_code=500, content={"detail": str(exc)})


class SecurityHeadersMiddleware:
    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def send_with_headers(message):
            if message["type"] == "http.response.start":
                message.setdefault("headers", [])
                message["headers"].extend([
                    (b"X-Content-Type-Options", b"nosniff"),
                    (b"X-Frame-Options", b"DENY"),
                    (b"X-XSS-Protection", b"1; mode=block"),
                ])
            await send(message)

        await self.app(scope, receive, send_with_headers)


app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins_list(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include module routes
app.include_router(auth_routes.router, prefix="/api/v1")
app.include_router(profiles_routes.router, prefix="/api/v1")
app.include_router(posts_routes.router, prefix="/api/v1")
app.include_router(follows_routes.router, prefix="/api/v1")
app.include_router(feed_routes.router, prefix="/api/v1")
app.include_router(teams_routes.router, prefix="/api/v1")
app.include_router(dashboard_routes.router, prefix="/api/v1")


@app.on_event("startup")
async def startup_event():
    logger.info("Application startup")
    if not settings.supabase_service_role_key:
        logger.warning("SUPABASE_SERVICE_ROLE_KEY not set; store writes use the anon key and depend on RLS")


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Application shutdown")


@app.get("/")
async def root():
    return {"message": "Welcome to teamfeed", "status": "healthy"}


@app.get("/health")
async def health():
    return {"status": "healthy"}


@app.get("/ready")
async def ready():
    """Readiness probe: extend here with a store round trip if needed."""
    return {"status": "ready"}
