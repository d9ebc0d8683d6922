from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging
from app.config import settings
from app.database import Database

# Configurar logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


def create_app(database: Optional[Database] = None) -> FastAPI:
    """
    Cria a aplicação. O `Database` é criado no startup (ou recebido pronto)
    e descartado no shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db = database or Database.from_settings(settings)
        app.state.database = db
        logger.info("Catalog API started")
        try:
            yield
        finally:
            db.dispose()
            app.state.database = None
            logger.info("Catalog API stopped")

    app = FastAPI(
        title="Catalog API",
        description="Camada de acesso a dados do catálogo de produtos",
        version="1.0.0",
        debug=settings.DEBUG,
        lifespan=lifespan,
    )

    # Configurar CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/")
    async def root():
        return {"message": "Catalog API está funcionando!"}

    @app.get("/health")
    async def health():
        """Health check básico"""
        return {"status": "healthy"}

    @app.get("/health/live")
    async def health_live():
        """Liveness check - verifica se a aplicação está viva"""
        return {"status": "alive"}

    @app.get("/health/ready")
    def health_ready(request: Request):
        """Readiness check - verifica se a aplicação está pronta para receber tráfego"""
        try:
            request.app.state.database.ping()
            return {"status": "ready"}
        except Exception as e:
            return JSONResponse(
                status_code=503,
                content={"status": "not ready", "error": str(e)}
            )

    @app.get("/health/db")
    def health_db(request: Request):
        """
        Health check específico para banco de dados PostgreSQL.
        Verifica conexão e executa query simples.
        """
        try:
            if request.app.state.database.ping():
                return {
                    "status": "healthy",
                    "service": "postgresql",
                    "message": "Database connection successful"
                }
            return JSONResponse(
                status_code=503,
                content={
                    "status": "unhealthy",
                    "service": "postgresql",
                    "message": "Database query failed"
                }
            )
        except Exception as e:
            logger.error(f"Database health check failed: {e}", exc_info=True)
            return JSONResponse(
                status_code=503,
                content={
                    "status": "unhealthy",
                    "service": "postgresql",
                    "error": str(e)
                }
            )

    return app


app = create_app()
