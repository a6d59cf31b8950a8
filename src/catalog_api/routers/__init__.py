from .auth import router as auth_router
from .products import router as products_router
from .users import router as users_router

_routers = [users_router, products_router, auth_router]

__all__ = ["get_routers"]


def get_routers():
    return _routers
