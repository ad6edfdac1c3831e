import pytest

from conftest import create_project, upload_csv
from synthdata.services.dataset_service import default_dataset_name, derive_schema, is_sensitive
from synthdata.services.template_service import DEFAULT_TEMPLATES


def test_id_column_is_flagged_sensitive():
    schema, _ = derive_schema("a,b,id\n1,2,3\n")

    assert [column["sensitive"] for column in schema] == [False, False, True]
    assert {column["type"] for column in schema} == {"string"}


@pytest.mark.parametrize("text, expected", [
    ("a,b\n", 0),
    ("a,b\n1,2\n3,4", 2),
    ("a,b\n\n1,2\n   \n3,4\n\n", 2),
    ("a,b\r\n1,2\r\n3,4\r\n", 2),
])
def test_row_count_is_non_blank_lines_minus_header(text, expected):
    _, row_count = derive_schema(text)

    assert row_count == expected


def test_headers_are_trimmed():
    schema, _ = derive_schema(" customer_id , Full Name ,amount\r\n")

    assert [column["name"] for column in schema] == ["customer_id", "Full Name", "amount"]
    assert [column["sensitive"] for column in schema] == [True, True, False]


def test_sensitivity_is_a_case_insensitive_substring_match():
    assert is_sensitive("PHONE_NUMBER")
    assert is_sensitive("Surname")
    assert is_sensitive("paid_at")  # "id" inside another word still matches
    assert not is_sensitive("amount")


def test_empty_file_is_rejected():
    with pytest.raises(ValueError):
        derive_schema("\n  \n")


def test_default_name_strips_csv_extension():
    assert default_dataset_name("mpesa_q4.csv") == "mpesa_q4"


def test_upload_creates_dataset_from_header(client, auth_headers, project):
    response = upload_csv(
        client, auth_headers, project["id"], "customer_id,amount,phone\nc1,10,07\nc2,20,07\n",
        filename="mpesa_q4.csv", description="Q4 transfers",
    )

    assert response.status_code == 201
    dataset = response.json()
    assert dataset["name"] == "mpesa_q4"
    assert dataset["description"] == "Q4 transfers"
    assert dataset["row_count"] == 2
    assert dataset["project_id"] == project["id"]
    assert dataset["data_type"] == "tabular"
    assert dataset["status"] == "uploaded"
    assert dataset["source"] == "file"
    assert [c["name"] for c in dataset["schema_json"]] == ["customer_id", "amount", "phone"]


def test_upload_keeps_explicit_name(client, auth_headers, project):
    response = upload_csv(client, auth_headers, project["id"], "a\n1\n", name="Loan book")

    assert response.json()["name"] == "Loan book"


def test_upload_rejects_non_csv_mime_type(client, auth_headers, project):
    response = upload_csv(client, auth_headers, project["id"], "a,b\n", filename="data.xlsx",
                          content_type="application/vnd.ms-excel")

    assert response.status_code == 400
    assert response.json()["detail"] == "Please upload a CSV file"


def test_upload_rejects_empty_file(client, auth_headers, project):
    response = upload_csv(client, auth_headers, project["id"], "\n\n")

    assert response.status_code == 400


def test_upload_into_foreign_project_is_not_found(client, auth_headers, other_headers):
    theirs = create_project(client, other_headers, name="Theirs")

    response = upload_csv(client, auth_headers, theirs["id"], "a\n1\n")

    assert response.status_code == 404


def test_templates_are_listed_by_name(client, auth_headers):
    response = client.get("/templates/", headers=auth_headers)

    assert response.status_code == 200
    names = [t["name"] for t in response.json()]
    assert names == sorted(t["name"] for t in DEFAULT_TEMPLATES)


def test_dataset_from_template_copies_schema(client, auth_headers, project):
    template = client.get("/templates/", headers=auth_headers).json()[0]

    response = client.post(
        "/datasets/from-template",
        json={"project_id": project["id"], "template_id": template["id"]},
        headers=auth_headers,
    )

    assert response.status_code == 201
    dataset = response.json()
    assert dataset["name"] == f"{template['name']} Template"
    assert dataset["description"] == template["description"]
    assert dataset["row_count"] == 1000
    assert dataset["schema_json"] == template["schema_json"]
    assert dataset["source"] == "template"


def test_unknown_template_is_not_found(client, auth_headers, project):
    response = client.post(
        "/datasets/from-template",
        json={"project_id": project["id"], "template_id": "missing"},
        headers=auth_headers,
    )

    assert response.status_code == 404


def test_get_and_list_datasets(client, auth_headers, other_headers, dataset):
    assert client.get(f"/datasets/{dataset['id']}", headers=auth_headers).json()["id"] == dataset["id"]
    assert client.get(f"/datasets/{dataset['id']}", headers=other_headers).status_code == 404

    listed = client.get("/datasets/", params={"project_id": dataset["project_id"]}, headers=auth_headers).json()
    assert [d["id"] for d in listed] == [dataset["id"]]
