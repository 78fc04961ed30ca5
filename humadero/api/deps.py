from fastapi import Request

from humadero.services.catalog import MenuCatalog
from humadero.services.health import HealthReporter
from humadero.services.orders import OrderIntake


def get_catalog(request: Request) -> MenuCatalog:
    return request.app.state.catalog


def get_order_intake(request: Request) -> OrderIntake:
    return request.app.state.order_intake


def get_health_reporter(request: Request) -> HealthReporter:
    return request.app.state.health_reporter
