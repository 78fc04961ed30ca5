from typing import Any, Dict

from fastapi import APIRouter, Body, Depends

from humadero.api.deps import get_order_intake
from humadero.services.orders import OrderIntake

router = APIRouter(prefix="/pedidos", tags=["pedidos"])


@router.post("")
def create_order(
    payload: Dict[str, Any] = Body(default={}),
    intake: OrderIntake = Depends(get_order_intake),
) -> Dict[str, Any]:
    # ValidationError -> 400 and PersistenceError -> 500 are rendered by the app's handlers
    order = intake.create(payload)
    return {
        "success": True,
        "mensaje": "Pedido recibido" if order.persistido else "Pedido recibido (modo demo, no se guardó)",
        "pedido": order.model_dump(),
    }
