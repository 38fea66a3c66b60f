import asyncio

import httpx
import pytest
from pydantic import ValidationError

from cargoshop.main import app
from cargoshop.config.settings import settings
from cargoshop.client import (
    ApiClientError, CatalogActions, MarketplaceClient, MarketplaceState, NegotiationFlow, ResourceSlice
)
from cargoshop.client.forms import CheckoutForm, PechinchaForm, ProductForm, ReviewForm
from cargoshop.client.listener import handle_message


@pytest.fixture
def api_client(client):
    # o fixture `client` instala o banco de teste nas dependências
    def factory():
        return MarketplaceClient(base_url="http://testserver", transport=httpx.ASGITransport(app=app))
    return factory


BIKE = {"name": "Bike", "price": 500, "seller": "alice", "image": "x.png", "category": "Esportes"}
CHECKOUT = {"endereco": "Rua A, 10", "opcaoEnvio": "PAC", "formaPagamento": "Pix"}


@pytest.mark.parametrize("enforce", [False, True])
def test_full_negotiation(api_client, monkeypatch, enforce):
    monkeypatch.setattr(settings, "enforce_pechincha_transitions", enforce)

    async def scenario():
        async with api_client() as seller_api, api_client() as buyer_api:
            await seller_api.signup("alice", "pw1")
            await buyer_api.signup("bob", "pw2")
            seller, buyer = MarketplaceState(seller_api), MarketplaceState(buyer_api)

            product = await seller.add("products", BIKE)
            await buyer.refresh("products")
            assert buyer["products"].get(product["id"]) == product

            buyer_flow = NegotiationFlow(buyer)
            offer = await buyer_flow.propose(product, 300)
            assert offer["seller"] == "alice"
            assert offer["pstatus"] == "pendente"

            offer = await buyer_flow.edit_discount(offer, 320)
            assert offer["discount"] == 320

            assert await seller.handle_event("pechinchaUpdated") == "pechinchas"
            pending = seller["pechinchas"].where(seller="alice", pstatus="pendente")
            assert [p["id"] for p in pending] == [offer["id"]]

            accepted = await NegotiationFlow(seller).accept(pending[0])
            assert accepted["pstatus"] == "aceito"

            pedido = await buyer_flow.pay(accepted, product, CheckoutForm(**CHECKOUT))
            assert pedido["price"] == 320
            assert pedido["comprador"] == "bob"
            assert pedido["NomeVendedor"] == "alice"
            assert pedido["status"] == "Finalizado"
            assert buyer["pechinchas"].get(offer["id"])["pstatus"] == "finalizado"

            review = await buyer_flow.review(pedido, ReviewForm(rate=5, message="Top"))
            assert review["orderId"] == pedido["id"]
            assert review["seller"] == "alice"

    asyncio.run(scenario())


def test_cancel_removes_offer(api_client):
    async def scenario():
        async with api_client() as api:
            await api.signup("bob", "pw")
            state = MarketplaceState(api)
            product = await state.add("products", {**BIKE, "seller": "bob"})
            flow = NegotiationFlow(state)
            offer = await flow.propose(product, 100)

            assert await flow.cancel(offer) == offer["id"]
            assert state["pechinchas"].get(offer["id"]) is None
            assert await api.list("pechinchas") == []

    asyncio.run(scenario())


def test_pay_requires_accepted_offer(api_client):
    async def scenario():
        async with api_client() as api:
            await api.signup("bob", "pw")
            flow = NegotiationFlow(MarketplaceState(api))
            with pytest.raises(ValueError):
                await flow.pay({"id": "x", "pstatus": "pendente"}, {"id": "p"}, CheckoutForm(**CHECKOUT))

    asyncio.run(scenario())


def test_proposal_outside_bounds_is_not_sent(api_client):
    async def scenario():
        async with api_client() as api:
            await api.signup("bob", "pw")
            state = MarketplaceState(api)
            product = await state.add("products", BIKE)
            with pytest.raises(ValidationError):
                await NegotiationFlow(state).propose(product, 480)
            assert await api.list("pechinchas") == []

    asyncio.run(scenario())


def test_backend_message_is_surfaced(api_client):
    async def scenario():
        async with api_client() as api:
            await api.signup("alice", "pw1")
            with pytest.raises(ApiClientError) as error:
                await api.login("alice", "wrong")
            assert error.value.status_code == 401
            assert error.value.message == "Usuário ou senha incorretos!"

            with pytest.raises(ApiClientError) as missing:
                await api.get("products", "nope")
            assert missing.value.message == "Product not found"

    asyncio.run(scenario())


def test_logout_clears_token(api_client):
    async def scenario():
        async with api_client() as api:
            await api.signup("alice", "pw1")
            assert (await api.logout())["message"] == "Deslogado com sucesso!"
            with pytest.raises(ApiClientError) as error:
                await api.list("pechinchas")
            assert error.value.status_code == 401

    asyncio.run(scenario())


def test_upload_image(api_client):
    async def scenario():
        async with api_client() as api:
            await api.signup("alice", "pw1")
            uploaded = await api.upload_image("bike.jpg", b"jpeg-bytes", "image/jpeg")
            assert uploaded["filename"] == "bike.jpg"

    asyncio.run(scenario())


def test_listener_refreshes_on_event(api_client):
    async def scenario():
        async with api_client() as api:
            await api.signup("alice", "pw1")
            state = MarketplaceState(api)
            await api.create("products", BIKE)

            assert await handle_message(state, '{"event": "productUpdated"}') == "products"
            assert len(state["products"].all()) == 1
            assert await handle_message(state, "not json") is None
            assert await handle_message(state, '{"event": "somethingElse"}') is None

    asyncio.run(scenario())


def test_resource_slice():
    slice_ = ResourceSlice("products")
    slice_.set_all([{"id": "a", "seller": "alice"}, {"id": "b", "seller": "bob"}])

    slice_.upsert({"id": "c", "seller": "alice"})
    slice_.remove("b")
    slice_.remove("missing")

    assert slice_.status == "loaded"
    assert [item["id"] for item in slice_.where(seller="alice")] == ["a", "c"]
    assert slice_.get("b") is None


def test_forms():
    assert ProductForm(name=" Bike ", price=10, category="Esportes").name == "Bike"
    with pytest.raises(ValidationError):
        ProductForm(name="  ", price=10, category="Esportes")
    with pytest.raises(ValidationError):
        ProductForm(name="Bike", price=0, category="Esportes")

    assert PechinchaForm(discount=50, product_price=500).discount == 50
    with pytest.raises(ValidationError):
        PechinchaForm(discount=49, product_price=500)
    with pytest.raises(ValidationError):
        PechinchaForm(discount=451, product_price=500)

    with pytest.raises(ValidationError):
        CheckoutForm(endereco="", opcaoEnvio="PAC", formaPagamento="Pix")
    with pytest.raises(ValidationError):
        ReviewForm(rate=0)


def test_catalog_publish_edit_and_remove(api_client):
    async def scenario():
        async with api_client() as api:
            await api.signup("alice", "pw1")
            state = MarketplaceState(api)
            catalog = CatalogActions(state)
            form = ProductForm(name="Bike", price=500, category="Esportes", description="Aro 29")

            product = await catalog.publish(form)
            assert product["seller"] == "alice"
            assert product["image"].endswith("/images/template.png")

            edited = await catalog.edit(product, ProductForm(name="Bike", price=450, category="Esportes"))
            assert edited["price"] == 450
            assert edited["image"] == product["image"]

            with_photo = await catalog.edit(edited, ProductForm(name="Bike", price=450, category="Esportes"),
                                            image=("bike.png", b"png", "image/png"))
            assert with_photo["image"].endswith("/images/bike.png")

            assert await catalog.remove(with_photo) == product["id"]
            assert state["products"].all() == []

    asyncio.run(scenario())
