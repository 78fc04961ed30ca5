"""Order intake: validate the submitted body, assign identity, persist once."""

import logging
import math
import time
import uuid
from datetime import datetime, timezone
from numbers import Real
from typing import Any, Dict, List, Mapping, Optional

from pydantic import ValidationError as ModelValidationError

from humadero.core.errors import ValidationError
from humadero.db.repositories import OrderRepository
from humadero.schemas.order import (
    DEFAULT_ADDRESS,
    DEFAULT_PHONE,
    ORDER_STATUS_PENDING,
    Order,
    OrderCreate,
)

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("cliente", "items", "total")
OPTIONAL_TEXT_FIELDS = {"direccion": DEFAULT_ADDRESS, "telefono": DEFAULT_PHONE, "notas": ""}


def generate_order_id() -> str:
    # Millisecond clock plus 32 random bits: HUM-1760000000000-1A2B3C4D
    return f"HUM-{int(time.time() * 1000)}-{uuid.uuid4().hex[:8].upper()}"


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict)):
        return len(value) == 0
    if isinstance(value, Real) and not isinstance(value, bool):
        return value == 0
    return False


def _is_finite(value: Real) -> bool:
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def validate_order(payload: Mapping[str, Any]) -> OrderCreate:
    """Check required fields and normalize optional ones.

    A required field counts as missing when absent, null, blank, an empty
    list, or zero. Present values of the wrong type (or a negative total)
    are reported separately as invalid.
    """
    missing: List[str] = [f for f in REQUIRED_FIELDS if _is_blank(payload.get(f))]
    invalid: List[str] = []

    cliente = payload.get("cliente")
    if "cliente" not in missing and not isinstance(cliente, str):
        invalid.append("cliente")

    items = payload.get("items")
    if "items" not in missing and not isinstance(items, list):
        invalid.append("items")

    total = payload.get("total")
    if "total" not in missing:
        if isinstance(total, bool) or not isinstance(total, Real):
            invalid.append("total")
        elif not _is_finite(total) or total < 0:
            invalid.append("total")

    optional: Dict[str, str] = {}
    for field, default in OPTIONAL_TEXT_FIELDS.items():
        value = payload.get(field)
        if _is_blank(value):
            optional[field] = default
        elif isinstance(value, str):
            optional[field] = value.strip()
        else:
            invalid.append(field)

    if missing or invalid:
        message = "Faltan campos requeridos" if missing else "Campos con valores inválidos"
        raise ValidationError(message, missing=missing, invalid=invalid)

    try:
        return OrderCreate(cliente=cliente.strip(), items=items, total=float(total), **optional)
    except ModelValidationError as e:
        fields = sorted({str(err["loc"][0]) for err in e.errors() if err.get("loc")})
        raise ValidationError("Campos con valores inválidos", invalid=fields) from e


class OrderIntake:
    """Creates orders; without a repository it acknowledges them in demo mode."""

    def __init__(self, repository: Optional[OrderRepository] = None) -> None:
        self.repository = repository

    @property
    def durable(self) -> bool:
        return self.repository is not None

    def create(self, payload: Mapping[str, Any]) -> Order:
        data = validate_order(payload)
        order = Order(
            id=generate_order_id(),
            estado=ORDER_STATUS_PENDING,
            fecha=_now_iso(),
            **data.model_dump(),
        )

        if self.repository is None:
            logger.warning(f"Order {order.id} acknowledged without storage (demo mode)")
            return order

        # PersistenceError propagates: a failed write is never acknowledged
        stored = self.repository.insert(order.model_dump(exclude={"persistido"}))
        order = order.model_copy(update={"id": str(stored.get("id") or order.id), "persistido": True})
        logger.info(f"Order {order.id} stored for {order.cliente} (total {order.total})")
        return order
