import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

from app.database import get_db
from app.main import app
from app.config import settings
from app.services.gateway import DataGateway


def _set_sqlite_pragmas(dbapi_conn, connection_record):
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest.fixture
def tmp_data_dir(tmp_path):
    data_dir = tmp_path / "MutoConsults"
    data_dir.mkdir()
    return data_dir


@pytest.fixture
def test_db(tmp_data_dir):
    db_path = tmp_data_dir / "db.sqlite"
    engine = create_engine(
        f"sqlite:///{db_path}",
        connect_args={"check_same_thread": False},
    )
    event.listen(engine, "connect", _set_sqlite_pragmas)
    TestSession = sessionmaker(bind=engine, autoflush=False, autocommit=False)

    from app.database import init_db
    init_db(db_path)

    def override_get_db():
        db = TestSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestSession
    app.dependency_overrides.clear()
    engine.dispose()


@pytest.fixture
def gateway(test_db):
    """A gateway on the test database with no signed-in user."""
    db = test_db()
    yield DataGateway(db)
    db.close()


@pytest.fixture
def client(tmp_data_dir, test_db):
    original_data_dir = settings.data_dir
    settings.data_dir = tmp_data_dir
    c = TestClient(app)
    yield c
    settings.data_dir = original_data_dir


JOB_PAYLOAD = {
    "title": "Office Administrator",
    "company": "Muto Consults",
    "location": "Kampala",
    "type": "Full-time",
    "description": "Run the front office.",
    "requirements": "Two years of administration experience.",
    "salary_range": "UGX 500,000 - 1,000,000",
    "deadline": "2099-12-31",
}


def sign_in(client, email="ada@example.com", password="correct-horse-battery"):
    client.post("/api/v1/auth/sign-up", json={"email": email, "password": password})
    r = client.post("/api/v1/auth/sign-in", json={"email": email, "password": password})
    return r.json()


def auth(token):
    return {"Authorization": f"Bearer {token}"}
