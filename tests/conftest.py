import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_TEMPLATES"] = "true"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from synthdata.utils.database import DatabaseUtils

# One shared in-memory database for the API and the test sessions
engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
DatabaseUtils.bind(engine)

from synthdata.main import app  # noqa: E402

PASSWORD = "s3cret-pass"


@pytest.fixture
def client():
    DatabaseUtils.Base.metadata.drop_all(bind=engine)
    with TestClient(app) as test_client:
        yield test_client
    DatabaseUtils.Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db(client):
    with DatabaseUtils.db_session() as session:
        yield session


def sign_up(client, email: str, password: str = PASSWORD) -> dict:
    response = client.post("/auth/register", json={"email": email, "password": password})
    assert response.status_code == 201, response.text
    token = client.post("/auth/token", data={"username": email, "password": password}).json()["access_token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers(client):
    return sign_up(client, "analyst@synthdata.co.ke")


@pytest.fixture
def other_headers(client):
    return sign_up(client, "auditor@synthdata.co.ke")


def create_project(client, headers, name="Loans Pilot", **extra) -> dict:
    response = client.post("/projects/", json={"name": name, **extra}, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def upload_csv(client, headers, project_id, content: str, filename="loans.csv", content_type="text/csv", **form):
    return client.post(
        "/datasets/upload",
        data={"project_id": project_id, **form},
        files={"file": (filename, content.encode("utf-8"), content_type)},
        headers=headers,
    )


@pytest.fixture
def project(client, auth_headers):
    return create_project(client, auth_headers)


@pytest.fixture
def dataset(client, auth_headers, project):
    response = upload_csv(client, auth_headers, project["id"], "customer_id,amount,phone\nc1,100,0700\n")
    assert response.status_code == 201, response.text
    return response.json()
