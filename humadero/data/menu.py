"""Built-in catalog served whenever the database cannot be used."""

from typing import Tuple

from humadero.schemas.menu import MenuItem

FALLBACK_MENU: Tuple[MenuItem, ...] = (
    MenuItem(id=1, nombre="Taco al Pastor", precio=20, categoria="comida",
             descripcion="Tortilla de maíz con cerdo al pastor, piña y cilantro", popular=True),
    MenuItem(id=2, nombre="Taco de Asada", precio=22, categoria="comida",
             descripcion="Tortilla de maíz con carne asada y salsa verde"),
    MenuItem(id=3, nombre="Quesadilla", precio=25, categoria="comida",
             descripcion="Tortilla de harina con queso fundido"),
    MenuItem(id=4, nombre="Refresco", precio=18, categoria="bebidas", popular=True),
    MenuItem(id=5, nombre="Agua", precio=15, categoria="bebidas",
             descripcion="Agua fresca del día"),
    MenuItem(id=6, nombre="Flan", precio=25, categoria="postres",
             descripcion="Flan napolitano casero", popular=True),
    MenuItem(id=7, nombre="Gelatina", precio=20, categoria="postres"),
)
