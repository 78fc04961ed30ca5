from typing import Dict, List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field

CATEGORIES = ("comida", "bebidas", "postres")

Categoria = Literal["comida", "bebidas", "postres"]


class MenuItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., gt=0)
    nombre: str = Field(..., min_length=1)
    precio: float = Field(..., gt=0)
    categoria: Categoria
    descripcion: Optional[str] = None
    popular: bool = False


class MenuSnapshot(BaseModel):
    """Catalog grouped by category, plus where it came from."""

    groups: Dict[str, List[MenuItem]]
    source: Literal["database", "fallback"]
    warning: Optional[str] = None

    @property
    def is_fallback(self) -> bool:
        return self.source == "fallback"

    def to_response(self) -> Dict[str, object]:
        body: Dict[str, object] = {
            cat: [item.model_dump(exclude_none=True) for item in self.groups.get(cat, [])]
            for cat in CATEGORIES
        }
        if self.warning:
            body["warning"] = self.warning
        return body
