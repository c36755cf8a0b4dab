# crema_backend/app/main.py - backend entrypoint
import importlib

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from crema_backend.app.config import APP_ENV, CORS_ORIGINS
from crema_backend.app.utils.logs import get_logger

log = get_logger("crema.main")

app = FastAPI(title="Crema API")

# --- CORS for Vite dev -------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Include routers under /api ----------------------------------------------
def _include(module_name: str, prefix: str = "/api") -> None:
    m = importlib.import_module(f"crema_backend.app.routers.{module_name}")
    app.include_router(m.router, prefix=prefix)
    log.info("mounted %s at %s", module_name, prefix)

_include("shot_feedback")      # /api/shot-feedback/...

# --- Health ------------------------------------------------------------------
@app.get("/health")
async def health():
    return {"ok": True, "env": APP_ENV}

@app.get("/api/health")
async def api_health():
    # mirror the non-prefixed /health so the FE's /api/health succeeds
    return {"ok": True, "env": APP_ENV}
