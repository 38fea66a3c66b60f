# cargoshop/client/negotiation.py
import logging
from typing import Any, Dict

from .forms import CheckoutForm, PechinchaForm, ReviewForm
from .state import MarketplaceState

logger = logging.getLogger(__name__)

ORDER_STATUS_PAID = "Finalizado"


class NegotiationFlow:
    """
    Fluxo da pechincha como o cliente o conduz

    pendente -> aceito -> finalizado. Cancelar (comprador) ou recusar
    (vendedor) remove o registro. Pagar cria o pedido e depois marca a
    pechincha como finalizada; são duas escritas independentes.
    """

    def __init__(self, state: MarketplaceState):
        self.state = state

    @property
    def username(self) -> str:
        return self.state.client.username

    async def propose(self, product: Dict[str, Any], discount: float) -> Dict[str, Any]:
        """Comprador propõe um valor para o produto"""
        form = PechinchaForm(discount=discount, product_price=product["price"])
        return await self.state.add("pechinchas", {
            "idProduct": product["id"],
            "discount": form.discount,
            "buyer": self.username,
            "pstatus": "pendente"
        })

    async def edit_discount(self, pechincha: Dict[str, Any], discount: float) -> Dict[str, Any]:
        form = PechinchaForm(discount=discount, product_price=pechincha["price"])
        return await self.state.update("pechinchas", self._document(pechincha, discount=form.discount))

    async def accept(self, pechincha: Dict[str, Any]) -> Dict[str, Any]:
        """Vendedor aceita o valor proposto"""
        return await self.state.update("pechinchas", self._document(pechincha, pstatus="aceito"))

    async def cancel(self, pechincha: Dict[str, Any]) -> str:
        """Cancelar (comprador) ou recusar (vendedor)"""
        return await self.state.remove("pechinchas", pechincha["id"])

    refuse = cancel

    async def pay(
        self,
        pechincha: Dict[str, Any],
        product: Dict[str, Any],
        checkout: CheckoutForm
    ) -> Dict[str, Any]:
        """Criar o pedido com o valor negociado e finalizar a pechincha"""
        if pechincha.get("pstatus") != "aceito":
            raise ValueError("Só é possível pagar uma pechincha aceita")

        pedido = await self.state.add("pedidos", {
            **checkout.model_dump(),
            "idProduto": product["id"],
            "name": product["name"],
            "image": product.get("image"),
            "price": pechincha["discount"],
            "NomeVendedor": product["seller"],
            "comprador": self.username,
            "status": ORDER_STATUS_PAID
        })
        await self.state.update("pechinchas", self._document(pechincha, pstatus="finalizado"))
        logger.info(f"💰 Pedido {pedido['id']} criado para a pechincha {pechincha['id']}")
        return pedido

    async def review(self, pedido: Dict[str, Any], form: ReviewForm) -> Dict[str, Any]:
        """Comprador avalia o vendedor depois do pedido"""
        return await self.state.add("reviews", {
            "orderId": pedido["id"],
            "buyer": pedido["comprador"],
            "seller": pedido["NomeVendedor"],
            "rate": form.rate,
            "message": form.message
        })

    @staticmethod
    def _document(pechincha: Dict[str, Any], **changes) -> Dict[str, Any]:
        fields = ("id", "productId", "discount", "price", "buyer", "seller", "pstatus")
        document = {field: pechincha.get(field) for field in fields}
        document.update(changes)
        return document
