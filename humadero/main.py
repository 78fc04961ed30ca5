import logging
import time
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.gzip import GZipMiddleware
from supabase import Client

from humadero.api.router import api_router
from humadero.core.config import Settings, get_settings
from humadero.core.errors import list_routes, register_exception_handlers
from humadero.core.logging import configure_logging
from humadero.db.database import create_supabase_client
from humadero.db.repositories import MenuRepository, OrderRepository
from humadero.services.catalog import MenuCatalog
from humadero.services.health import HealthReporter
from humadero.services.orders import OrderIntake

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, supabase_client: Optional[Client] = None) -> FastAPI:
    """Wire the services around one explicitly owned database client.

    Without a client (no SUPABASE_URL/key, or none passed in) the menu is
    served from the built-in list and orders are acknowledged in demo mode.
    """
    settings = settings or get_settings()
    if supabase_client is None and settings.database_configured:
        supabase_client = create_supabase_client(settings)

    app = FastAPI(title=settings.PROJECT_NAME, version=settings.VERSION)

    menu_repository = order_repository = None
    if supabase_client is not None:
        menu_repository = MenuRepository(supabase_client, settings.SUPABASE_MENU_TABLE)
        order_repository = OrderRepository(supabase_client, settings.SUPABASE_ORDERS_TABLE)

    app.state.settings = settings
    app.state.catalog = MenuCatalog(menu_repository)
    app.state.order_intake = OrderIntake(order_repository)
    app.state.health_reporter = HealthReporter(menu_repository, started_at=time.monotonic())

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Menu-Source"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=1024)

    register_exception_handlers(app, settings)
    app.include_router(api_router)

    @app.get("/")
    def root():
        return {
            "mensaje": "Humadero API funcionando 🔥",
            "version": settings.VERSION,
            "entorno": settings.ENVIRONMENT,
            "endpoints": list_routes(app),
        }

    logger.info(
        f"{settings.PROJECT_NAME} v{settings.VERSION} ready "
        f"(environment={settings.ENVIRONMENT}, backend={'supabase' if supabase_client is not None else 'demo'}, "
        f"origins={','.join(settings.CORS_ALLOW_ORIGINS)})"
    )
    return app


configure_logging(get_settings().LOG_LEVEL)
app = create_app()

if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    logger.info(f"API escuchando en puerto {settings.PORT}")
    uvicorn.run("humadero.main:app", host=settings.HOST, port=settings.PORT)
