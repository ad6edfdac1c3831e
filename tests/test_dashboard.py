from conftest import create_project, upload_csv
from synthdata.models.auth import User
from synthdata.services.dashboard_service import DashboardService


def test_stats_count_the_callers_rows(client, auth_headers, other_headers, dataset):
    client.post("/generations/", json={"dataset_id": dataset["id"]}, headers=auth_headers)
    theirs = create_project(client, other_headers, name="Theirs")
    upload_csv(client, other_headers, theirs["id"], "a\n1\n")

    stats = client.get("/dashboard/stats", headers=auth_headers).json()

    assert stats == {
        "total_projects": 1,
        "total_datasets": 1,
        "total_generations": 1,
        "recent_activity": 1,
    }


def test_stats_for_a_new_user_are_zero(client, auth_headers):
    stats = client.get("/dashboard/stats", headers=auth_headers).json()

    assert set(stats.values()) == {0}


def test_shared_dataset_count_covers_every_user(client, auth_headers, other_headers, dataset, db):
    theirs = create_project(client, other_headers, name="Theirs")
    upload_csv(client, other_headers, theirs["id"], "a\n1\n")
    user = db.query(User).filter(User.email == "analyst@synthdata.co.ke").one()

    assert DashboardService(db, shared_dataset_count=False).count_datasets(user.id) == 1
    assert DashboardService(db, shared_dataset_count=True).count_datasets(user.id) == 2
