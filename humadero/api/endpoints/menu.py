from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Response

from humadero.api.deps import get_catalog
from humadero.services.catalog import MenuCatalog

router = APIRouter(prefix="/menu", tags=["menu"])

SOURCE_HEADER = "X-Menu-Source"


@router.get("")
def get_menu(response: Response, catalog: MenuCatalog = Depends(get_catalog)) -> Dict[str, Any]:
    snapshot = catalog.get_all()
    response.headers[SOURCE_HEADER] = snapshot.source
    return snapshot.to_response()


@router.get("/{categoria}")
def get_menu_category(
    categoria: str,
    response: Response,
    catalog: MenuCatalog = Depends(get_catalog),
) -> List[Dict[str, Any]]:
    items, source = catalog.fetch_category(categoria)
    if source:
        response.headers[SOURCE_HEADER] = source
    return [item.model_dump(exclude_none=True) for item in items]
