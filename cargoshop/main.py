# cargoshop/main.py
import logging
from pathlib import Path
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from contextlib import asynccontextmanager

from cargoshop.config.settings import settings
from cargoshop.config.database import init_db
from cargoshop.core.middleware import setup_middleware, setup_exception_handlers
from cargoshop.core.realtime import ConnectionManager
from cargoshop.api.v1.router import api_router

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("🚀 Cargoshop API Starting...")
    logger.info(f"📍 Version: {settings.version}")
    logger.info(f"🔐 JWT Algorithm: {settings.algorithm}")
    logger.info(f"⏰ Token Expire: {settings.access_token_expire_minutes} minutes")
    logger.info(f"🗄️  Database: {settings.database_host}")
    init_db()

    yield

    # Shutdown
    logger.info("🛑 Cargoshop API Shutting down...")

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    description="Marketplace com negociação de preço (pechinchas), pedidos e avaliações",
    lifespan=lifespan
)

# Broadcaster de tempo real da aplicação
app.state.broadcaster = ConnectionManager()

# Setup middleware
setup_middleware(app)
setup_exception_handlers(app)

# Include routers
app.include_router(api_router)

# Imagens estáticas
Path(settings.images_dir).mkdir(parents=True, exist_ok=True)
app.mount("/images", StaticFiles(directory=settings.images_dir), name="images")

# Root endpoint
@app.get("/")
async def root():
    return {
        "message": "Cargoshop API",
        "version": settings.version,
        "status": "running",
        "docs": "/docs"
    }

@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "version": settings.version,
        "app": settings.app_name,
        "realtime_clients": len(app.state.broadcaster.active_connections)
    }

if __name__ == "__main__":
    import uvicorn
    logging.basicConfig(level=logging.INFO)
    uvicorn.run(
        "cargoshop.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
