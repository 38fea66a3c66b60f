# cargoshop/client/catalog.py
from typing import Any, Dict, Optional, Tuple

from cargoshop.config.settings import settings
from .forms import ProductForm
from .state import MarketplaceState

# (nome do arquivo, conteúdo, content-type)
ImageFile = Tuple[str, bytes, str]


class CatalogActions:
    """Cadastro e edição de produtos pelo vendedor logado"""

    def __init__(self, state: MarketplaceState):
        self.state = state

    async def _image_url(self, image: Optional[ImageFile]) -> Optional[str]:
        if image is None:
            return None
        uploaded = await self.state.client.upload_image(*image)
        return uploaded["url"]

    async def publish(self, form: ProductForm, image: Optional[ImageFile] = None) -> Dict[str, Any]:
        """Sem imagem o produto recebe a imagem padrão"""
        image_url = await self._image_url(image)
        if image_url is None:
            image_url = f"{settings.public_base_url.rstrip('/')}/images/{settings.default_product_image}"

        return await self.state.add("products", {
            **form.model_dump(),
            "seller": self.state.client.username,
            "image": image_url
        })

    async def edit(
        self,
        product: Dict[str, Any],
        form: ProductForm,
        image: Optional[ImageFile] = None
    ) -> Dict[str, Any]:
        """Sem imagem nova o produto mantém a atual"""
        image_url = await self._image_url(image) or product.get("image")

        return await self.state.update("products", {
            **form.model_dump(),
            "id": product["id"],
            "seller": self.state.client.username,
            "image": image_url
        })

    async def remove(self, product: Dict[str, Any]) -> str:
        return await self.state.remove("products", product["id"])
