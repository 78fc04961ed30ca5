from fastapi import APIRouter
from humadero.api.endpoints import health, menu, orders

api_router = APIRouter()

api_router.include_router(menu.router)
api_router.include_router(orders.router)
api_router.include_router(health.router)
