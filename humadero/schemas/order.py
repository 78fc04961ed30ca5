from typing import Any, List, Optional
from pydantic import BaseModel, Field

ORDER_STATUS_PENDING = "pendiente"
DEFAULT_ADDRESS = "Recoger en tienda"
DEFAULT_PHONE = "No proporcionado"


class OrderCreate(BaseModel):
    """Accepted order fields after validation; other keys in the body are ignored."""

    cliente: str = Field(..., min_length=1)
    items: List[Any] = Field(..., min_length=1)
    total: float = Field(..., gt=0)
    direccion: str = DEFAULT_ADDRESS
    telefono: str = DEFAULT_PHONE
    notas: str = ""


class Order(OrderCreate):
    id: str
    estado: str = ORDER_STATUS_PENDING
    fecha: str
    persistido: bool = False
