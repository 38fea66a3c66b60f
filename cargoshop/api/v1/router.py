# cargoshop/api/v1/router.py
from fastapi import APIRouter
from cargoshop.api.v1.socket import router as socket_router
from cargoshop.modules.users.router import router as users_router
from cargoshop.modules.products.router import router as products_router
from cargoshop.modules.pechinchas.router import router as pechinchas_router
from cargoshop.modules.pedidos.router import router as pedidos_router
from cargoshop.modules.reviews.router import router as reviews_router
from cargoshop.modules.uploads.router import router as uploads_router

# Router principal; os caminhos ficam na raiz como no servidor original
api_router = APIRouter()

api_router.include_router(users_router, prefix="/users", tags=["Users"])

api_router.include_router(
    products_router,
    prefix="/products",
    tags=["Products"]
)

api_router.include_router(
    pechinchas_router,
    prefix="/pechinchas",
    tags=["Pechinchas"]
)

api_router.include_router(
    pedidos_router,
    prefix="/pedidos",
    tags=["Pedidos"]
)

api_router.include_router(
    reviews_router,
    prefix="/reviews",
    tags=["Reviews"]
)

api_router.include_router(
    uploads_router,
    prefix="/imageUpload",
    tags=["Images"]
)

api_router.include_router(socket_router, tags=["Realtime"])
