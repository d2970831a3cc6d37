import pytest

from app import app as flask_app
from services import password_hasher
from services.store import JsonFileStore, MemoryStore


@pytest.fixture(autouse=True)
def fast_bcrypt(monkeypatch):
    monkeypatch.setattr(password_hasher, "BCRYPT_ROUNDS", 4)


@pytest.fixture
def memory_store():
    return MemoryStore()


@pytest.fixture
def file_store(tmp_path):
    return JsonFileStore(str(tmp_path / "db.json"))


@pytest.fixture
def client(memory_store, monkeypatch):
    monkeypatch.setitem(flask_app.config, "STORE", memory_store)
    flask_app.config["TESTING"] = True
    with flask_app.test_client() as c:
        yield c


@pytest.fixture
def file_client(file_store, monkeypatch):
    monkeypatch.setitem(flask_app.config, "STORE", file_store)
    flask_app.config["TESTING"] = True
    with flask_app.test_client() as c:
        yield c


@pytest.fixture
def signup(client):
    def _signup(name="Ann", roll="R1", email="a@x.com", password="secret"):
        return client.post(
            "/api/signup",
            json={"name": name, "roll": roll, "email": email, "password": password},
        )
    return _signup
