def test_queue_flow(client, desk):
    assert client.get("/api/queue").json() == []

    for cid, name in [("CLI001", "Maria"), ("CLI002", "João")]:
        response = client.post("/api/queue", json={"id": cid, "name": name, "reason": "Dúvida"})
        assert response.status_code == 201
        assert response.json() == {"id": cid, "name": name, "reason": "Dúvida"}

    assert [c["id"] for c in client.get("/api/queue").json()] == ["CLI001", "CLI002"]

    response = client.post("/api/queue/serve")
    assert response.status_code == 200
    body = response.json()
    assert body["customer"]["id"] == "CLI001"
    assert body["request"]["id"] == "REQ_AUTO_1"
    assert client.get("/api/history").json()[0]["id"] == "REQ_AUTO_1"


def test_serve_empty_queue_conflict(client):
    response = client.post("/api/queue/serve")
    assert response.status_code == 409
    assert response.json()["detail"] == "Erro: Fila de Atendimento está vazia."


def test_history_flow(client):
    for rid in ["REQ001", "REQ002"]:
        assert client.post("/api/history", json={"id": rid, "description": "x"}).status_code == 201

    response = client.delete("/api/history/top")
    assert response.status_code == 200
    assert response.json()["id"] == "REQ002"
    assert [r["id"] for r in client.get("/api/history").json()] == ["REQ001"]


def test_pop_empty_history_conflict(client):
    response = client.delete("/api/history/top")
    assert response.status_code == 409
    assert "Pilha de Histórico" in response.json()["detail"]


def test_status(client, desk):
    desk.seed()
    assert client.get("/api/status").json() == {
        'queue_empty': False,
        'history_empty': False,
        'queue_size': 10,
        'history_size': 10
    }


def test_missing_fields_rejected(client):
    assert client.post("/api/queue", json={"id": "CLI001"}).status_code == 422
