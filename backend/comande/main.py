# =============================================================================
# COMANDE v1.0 - FASTAPI MAIN
# =============================================================================
# Applicazione FastAPI principale
# =============================================================================

from .routers import (
    viste,
    transizioni,
    eventi,
)
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import config
from .exceptions import ComandeException
from .services.reminders import (
    shutdown_promemoria_scheduler,
    get_promemoria_scheduler_status,
)

logger = logging.getLogger('comande.main')


def configura_logging() -> None:
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    logging.getLogger('comande').setLevel(config.LOG_LEVEL)


# =============================================================================
# LIFESPAN - Startup/Shutdown
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Gestisce startup e shutdown dell'applicazione."""
    configura_logging()
    logger.info(f"{config.APP_NAME} v{config.VERSION} - Avvio...")

    yield

    # Shutdown
    shutdown_promemoria_scheduler()
    logger.info(f"{config.APP_NAME} - Arresto...")


# =============================================================================
# APP FASTAPI
# =============================================================================

app = FastAPI(
    title="COMANDE API",
    description="Ciclo di vita ordinazioni e viste per postazione",
    version=config.VERSION,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origin_regex=r"https?://.*",
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# ROUTERS
# =============================================================================

API_PREFIX = config.API_PREFIX

app.include_router(viste.router, prefix=API_PREFIX, tags=["Viste"])
app.include_router(transizioni.router, prefix=API_PREFIX, tags=["Transizioni"])
app.include_router(eventi.router, prefix=API_PREFIX, tags=["Eventi"])


# =============================================================================
# ROOT ENDPOINTS
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """Endpoint root - info applicazione."""
    return {
        "app": config.APP_NAME,
        "version": config.VERSION,
        "status": "running",
        "docs": "/docs",
        "api": API_PREFIX
    }


@app.get("/health", tags=["Root"])
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "sse_heartbeat_sec": config.SSE_HEARTBEAT_SEC,
        "promemoria": get_promemoria_scheduler_status(),
    }


# =============================================================================
# ERROR HANDLERS
# =============================================================================

@app.exception_handler(ComandeException)
async def comande_exception_handler(request: Request, exc: ComandeException):
    """Eccezioni di dominio -> risposta JSON con codice e dettagli."""
    logger.warning(f"{exc.code} su {request.url.path}: {exc.detail}")
    http_exc = exc.to_http_exception()
    return JSONResponse(status_code=http_exc.status_code, content={"detail": http_exc.detail})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handler globale per eccezioni non gestite."""
    logger.exception(f"Errore non gestito su {request.url.path}")
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal Server Error",
            "detail": str(exc),
            "path": str(request.url)
        }
    )


# =============================================================================
# RUN (per sviluppo)
# =============================================================================

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "comande.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True
    )
