import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Query, Session

REVIEW = {"orderId": "o1", "buyer": "bob", "seller": "alice", "rate": 5, "message": "Top"}

ORDER = {
    "endereco": "Rua A, 10",
    "opcaoEnvio": "PAC",
    "formaPagamento": "Pix",
    "idProduto": "p1",
    "name": "Bike",
    "price": 300,
    "image": "x.png",
    "NomeVendedor": "alice",
    "comprador": "bob",
    "status": "Finalizado",
}


def database_locked(*args, **kwargs):
    raise OperationalError("INSERT INTO documents", {}, Exception("database is locked"))


@pytest.fixture
def locked_flush(monkeypatch):
    """Qualquer escrita pendente falha ao ir para o banco"""
    def _lock():
        monkeypatch.setattr(Session, "flush", database_locked)
    return _lock


@pytest.fixture
def documents(client, bob, bike):
    pechincha = client.post("/pechinchas", json={
        "idProduct": bike["id"], "buyer": "bob", "discount": 300, "pstatus": "pendente"
    }, headers=bob).json()
    pedido = client.post("/pedidos", json=ORDER, headers=bob).json()
    review = client.post("/reviews", json=REVIEW, headers=bob).json()
    return {
        "products": bike,
        "pechinchas": pechincha,
        "pedidos": pedido,
        "reviews": review,
    }


def update_body(resource, document):
    if resource == "pechinchas":
        body = {k: document[k] for k in ("id", "productId", "discount", "price", "buyer", "seller", "pstatus")}
        body["pstatus"] = "aceito"
        return body
    if resource == "products":
        return {**document, "price": 450}
    if resource == "pedidos":
        return {**document, "status": "Enviado"}
    return {**document, "rate": 4}


@pytest.mark.parametrize("resource, message", [
    ("products", "Failed to create product"),
    ("pechinchas", "Failed to create pechincha"),
    ("pedidos", "Failed to create order"),
    ("reviews", "Failed to create review"),
])
def test_create_write_failure(client, bob, bike, locked_flush, events, resource, message):
    bodies = {
        "products": {"name": "Mesa", "price": 120, "seller": "bob"},
        "pechinchas": {"idProduct": bike["id"], "buyer": "bob", "discount": 300, "pstatus": "pendente"},
        "pedidos": ORDER,
        "reviews": REVIEW,
    }
    locked_flush()

    response = client.post(f"/{resource}", json=bodies[resource], headers=bob)

    assert response.status_code == 500
    assert response.json() == {"error": message}
    assert events == []


@pytest.mark.parametrize("resource, message", [
    ("products", "Failed to update product"),
    ("pechinchas", "Failed to update pechincha"),
    ("pedidos", "Failed to update order"),
    ("reviews", "Failed to update review"),
])
def test_update_write_failure(client, bob, documents, locked_flush, events, resource, message):
    document = documents[resource]
    locked_flush()

    response = client.put(f"/{resource}/{document['id']}", json=update_body(resource, document), headers=bob)

    assert response.status_code == 500
    assert response.json() == {"error": message}
    assert events == []


@pytest.mark.parametrize("resource, message", [
    ("products", "Failed to delete product"),
    ("pechinchas", "Failed to delete pechincha"),
    ("pedidos", "Failed to delete order"),
    ("reviews", "Failed to delete review"),
])
def test_delete_write_failure(client, bob, documents, locked_flush, events, resource, message):
    document = documents[resource]
    locked_flush()

    response = client.delete(f"/{resource}/{document['id']}", headers=bob)

    assert response.status_code == 500
    assert response.json() == {"error": message}
    assert events == []


@pytest.mark.parametrize("resource, message", [
    ("products", "Failed to retrieve products"),
    ("pechinchas", "Failed to retrieve pechinchas"),
    ("pedidos", "Failed to retrieve orders"),
    ("reviews", "Failed to retrieve reviews"),
])
def test_scan_failure(client, bob, monkeypatch, resource, message):
    monkeypatch.setattr(Query, "all", database_locked)

    response = client.get(f"/{resource}", headers=bob)

    assert response.status_code == 500
    assert response.json() == {"error": message}


def test_failed_pechincha_write_leaves_nothing_behind(client, bob, bike, monkeypatch):
    with monkeypatch.context() as patch:
        patch.setattr(Session, "flush", database_locked)
        response = client.post("/pechinchas", json={
            "idProduct": bike["id"], "buyer": "bob", "discount": 300, "pstatus": "pendente"
        }, headers=bob)
    assert response.status_code == 500

    assert client.get("/pechinchas", headers=bob).json() == []


def test_failed_pechincha_update_keeps_previous_version(client, bob, documents, monkeypatch):
    pechincha = documents["pechinchas"]

    with monkeypatch.context() as patch:
        patch.setattr(Session, "flush", database_locked)
        response = client.put(f"/pechinchas/{pechincha['id']}", json=update_body("pechinchas", pechincha), headers=bob)
    assert response.json() == {"error": "Failed to update pechincha"}

    assert client.get(f"/pechinchas/{pechincha['id']}", headers=bob).json()["pstatus"] == "pendente"
