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


def test_create_and_get_order(client, bob, events):
    created = client.post("/pedidos", json=ORDER, headers=bob)

    assert created.status_code == 200
    pedido = created.json()
    assert pedido["id"]
    assert client.get(f"/pedidos/{pedido['id']}", headers=bob).json() == pedido
    assert events == ["pedidoUpdated"]


def test_order_not_found(client, bob):
    response = client.get("/pedidos/nope", headers=bob)

    assert response.status_code == 404
    assert response.json() == {"error": "Order not found"}


def test_update_order_keeps_product_id(client, bob):
    pedido = client.post("/pedidos", json=ORDER, headers=bob).json()

    response = client.put(f"/pedidos/{pedido['id']}", json={
        **pedido, "status": "Enviado", "idProduto": "other"
    }, headers=bob)

    assert response.status_code == 200
    assert response.json()["status"] == "Enviado"
    assert response.json()["idProduto"] == "p1"


def test_list_and_delete_orders(client, bob):
    pedido = client.post("/pedidos", json=ORDER, headers=bob).json()

    assert len(client.get("/pedidos", headers=bob).json()) == 1
    assert client.delete(f"/pedidos/{pedido['id']}", headers=bob).json() == {"id": pedido["id"]}
    assert client.delete("/pedidos/never-existed", headers=bob).json() == {"id": "never-existed"}
    assert client.get("/pedidos", headers=bob).json() == []


def test_review_crud(client, bob, events):
    created = client.post("/reviews", json={
        "orderId": "o1", "buyer": "bob", "seller": "alice", "rate": 5, "message": "Top"
    }, headers=bob)
    assert created.status_code == 200
    review = created.json()

    assert client.get(f"/reviews/{review['id']}", headers=bob).json() == review

    updated = client.put(f"/reviews/{review['id']}", json={**review, "rate": 4}, headers=bob)
    assert updated.json()["rate"] == 4

    assert client.delete(f"/reviews/{review['id']}", headers=bob).json() == {"id": review["id"]}
    assert client.get(f"/reviews/{review['id']}", headers=bob).json() == {"error": "Review not found"}
    assert events == ["reviewUpdated"] * 3


def test_review_rate_out_of_range(client, bob):
    response = client.post("/reviews", json={
        "orderId": "o1", "buyer": "bob", "seller": "alice", "rate": 9
    }, headers=bob)

    assert response.status_code == 422
