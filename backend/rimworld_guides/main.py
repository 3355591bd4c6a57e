from contextlib import asynccontextmanager
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .core.config import get_settings
from .core.logging import setup_logging
from .db.database import get_db
from .api import guides, colonists, admin

settings = get_settings()
setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger("app")

@asynccontextmanager
async def lifespan(app: FastAPI):
    # La siembra corre una vez antes de aceptar tráfico
    if settings.SEED_ON_STARTUP:
        db = await get_db()
        await db.initialize()
        logger.info("Almacén inicializado (backend=%s)", settings.STORE_BACKEND)
    yield

app = FastAPI(title=settings.PROJECT_NAME, version="0.1.0", lifespan=lifespan)

# CORS (permite llamadas desde el frontend local)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.FRONTEND_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(guides.router, prefix=settings.API_PREFIX)
app.include_router(colonists.router, prefix=settings.API_PREFIX)
app.include_router(admin.router, prefix=settings.API_PREFIX)

@app.get('/', tags=["health"], summary="Health check")
async def root():
    return {"status": "ok"}
