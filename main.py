import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.core.config import settings
from app.core.errors import register_error_handlers
from app.api.teams import ALLOWED_METHODS as TEAMS_ALLOWED_METHODS, router as teams_router
from app.db.session import init_db, engine

app = FastAPI(title="Teams Backend")

# CORS for local frontend dev
# Build CORS allowlist from local dev + configured origins
_base_origins = {
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
}
if settings.FRONTEND_BASE_URL:
    _base_origins.add(settings.FRONTEND_BASE_URL)
for o in settings.ALLOWED_ORIGINS:
    _base_origins.add(o)
# Normalize by stripping trailing slashes to match Origin header format
_allowed_origins = sorted({o.rstrip('/') for o in _base_origins if o})

# Credentials are required for the session cookie
app.add_middleware(
    CORSMiddleware,
    allow_origins=_allowed_origins,
    allow_origin_regex=r"^http(s)?://(localhost|127\.0\.0\.1)(:\d+)?$",
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app, allowed_methods={f"/api{teams_router.prefix}": TEAMS_ALLOWED_METHODS})


@app.get("/")
def read_root():
    return {"message": "Welcome to Teams Backend"}


@app.get("/health")
def health_check():
    return {"status": "ok"}


# Mount API routers
app.include_router(teams_router, prefix="/api")


@app.on_event("startup")
def on_startup():
    # Create tables if missing
    init_db()
    logging.getLogger("uvicorn.error").info("Database ready at %s", engine.url.render_as_string(hide_password=True))


@app.on_event("shutdown")
def on_shutdown():
    engine.dispose()
