from typing import Any, Dict

from fastapi import APIRouter, Depends

from humadero.api.deps import get_health_reporter
from humadero.schemas.health import HealthReport
from humadero.services.health import HealthReporter

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthReport)
def health_check(reporter: HealthReporter = Depends(get_health_reporter)) -> HealthReport:
    return reporter.report()


@router.get("/test")
def test_endpoint() -> Dict[str, Any]:
    return {
        "mensaje": "Endpoint de prueba funcionando",
        "ejemplo_pedido": {
            "cliente": "Ana",
            "items": [{"id": 1, "nombre": "Taco al Pastor", "cantidad": 2}],
            "total": 40,
            "direccion": "Recoger en tienda",
            "telefono": "No proporcionado",
            "notas": "Sin cebolla",
        },
    }
