import logging
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from supabase import Client

from app.config.settings import settings
from app.core.dependencies import get_supabase
from app.core.errors import error_message
from app.core.navigation import SessionGateMiddleware
from app.database.supabase_client import SupabaseConfigError
from app.modules.dashboard.models import COMPANY_DETAILS_TABLE
from app.modules.auth import routes as auth_routes
from app.modules.profiles import routes as profiles_routes
from app.modules.staff import routes as staff_routes
from app.modules.staff_requests import routes as staff_requests_routes
from app.modules.interviews import routes as interviews_routes
from app.modules.dashboard import routes as dashboard_routes
from app.modules.navigation import routes as navigation_routes

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address, default_limits=[settings.rate_limit])
app = FastAPI(
    title=settings.app_name,
    description="Client portal for browsing staff, requesting hires and booking interviews",
    debug=settings.debug,
    redirect_slashes=False,
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(SupabaseConfigError)
async def supabase_config_handler(request: Request, exc: SupabaseConfigError):
    logger.error(f"{request.url.path}: {exc}")
    return JSONResponse(status_code=503, content={"detail": "Backend is not configured"})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception on %s: %s", request.url.path, exc)
    detail = "Internal server error" if settings.is_production else str(exc)
    return JSONResponse(status_code=500, content={"detail": detail})


class SecurityHeadersMiddleware:
    HEADERS = [
        (b"X-Content-Type-Options", b"nosniff"),
        (b"X-Frame-Options", b"DENY"),
        (b"X-XSS-Protection", b"1; mode=block"),
        (b"Referrer-Policy", b"strict-origin-when-cross-origin"),
    ]

    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def send_with_headers(message):
            if message["type"] == "http.response.start":
                message.setdefault("headers", [])
                message["headers"].extend(self.HEADERS)
            await send(message)

        await self.app(scope, receive, send_with_headers)


# Starlette runs the last added middleware first: CORS, headers, then the session gate
app.add_middleware(SessionGateMiddleware)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins_list(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

for module_routes in (
    auth_routes,
    profiles_routes,
    staff_routes,
    staff_requests_routes,
    interviews_routes,
    dashboard_routes,
    navigation_routes,
):
    app.include_router(module_routes.router, prefix="/api/v1")


@app.on_event("startup")
async def startup_event():
    logger.info(f"Client portal starting ({settings.environment})")
    if not settings.supabase_url or not settings.supabase_key:
        logger.warning("SUPABASE_URL / SUPABASE_KEY not set; data endpoints will answer 503")


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Client portal shutting down")


@app.get("/")
async def root():
    return {"message": "FGS Staffing client portal API", "status": "healthy"}


@app.get("/health")
@limiter.exempt
async def health():
    return {"status": "healthy"}


@app.get("/ready")
@limiter.exempt
def ready(supabase: Client = Depends(get_supabase)):
    """Readiness probe: one cheap read against Supabase."""
    try:
        supabase.table(COMPANY_DETAILS_TABLE).select("id").limit(1).execute()
    except Exception as e:
        logger.warning(f"Readiness check failed: {error_message(e)}")
        return JSONResponse(status_code=503, content={"status": "unavailable"})
    return {"status": "ready"}
