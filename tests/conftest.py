import os
import tempfile

# imagens dos testes fora do diretório do projeto
os.environ.setdefault("IMAGES_DIR", tempfile.mkdtemp(prefix="cargoshop-images-"))

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from cargoshop.main import app
from cargoshop.config.database import get_db, init_db
from cargoshop.core.auth.service import AuthService
from cargoshop.core.realtime import ConnectionManager
from cargoshop.shared.database.document_store import DocumentStore
from cargoshop.shared.database.models import USERS


class RecordingConnection:
    """Conexão falsa que guarda os eventos recebidos"""

    def __init__(self):
        self.events = []

    async def send_json(self, data):
        self.events.append(data["event"])


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def broadcaster():
    previous = app.state.broadcaster
    manager = ConnectionManager()
    app.state.broadcaster = manager
    yield manager
    app.state.broadcaster = previous


@pytest.fixture
def events(broadcaster):
    connection = RecordingConnection()
    broadcaster.register(connection)
    return connection.events


@pytest.fixture
def client(session_factory, broadcaster):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def signup(client, username, password="pw"):
    response = client.post("/users/signup", json={"username": username, "password": password})
    assert response.status_code == 200, response.text
    return response.json()["token"]


@pytest.fixture
def make_user(client):
    """Registra um usuário e devolve os headers com o token"""
    def _make_user(username, password="pw"):
        return bearer(signup(client, username, password))
    return _make_user


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def alice(client):
    return bearer(signup(client, "alice"))


@pytest.fixture
def bob(client):
    return bearer(signup(client, "bob"))


@pytest.fixture
def carol(client):
    return bearer(signup(client, "carol"))


@pytest.fixture
def admin(client, session_factory):
    db = session_factory()
    try:
        DocumentStore(db).put(USERS, "root", {
            "username": "root",
            "password": AuthService.get_password_hash("rootpw"),
            "admin": True,
        })
    finally:
        db.close()
    response = client.post("/users/login", json={"username": "root", "password": "rootpw"})
    return bearer(response.json()["token"])


@pytest.fixture
def bike(client, alice):
    response = client.post("/products", json={
        "name": "Bike",
        "price": 500,
        "description": "Aro 29",
        "category": "Esportes",
        "seller": "alice",
        "image": "x.png",
    }, headers=alice)
    assert response.status_code == 200, response.text
    return response.json()
