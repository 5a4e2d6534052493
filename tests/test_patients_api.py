"""HTTP tests for the /patients resource."""
from datetime import date

import pytest

from clinica import services
from clinica.errors import PersistenceError
from clinica.store import ClinicStore

PATIENT = {
    "id": 0,
    "lastName": "Rossi",
    "firstName": "Mario",
    "middleName": "Luigi",
    "address": "Via Roma 1",
    "dateOfBirth": "1980-05-17",
    "gender": "M",
    "estateId": 1,
}


@pytest.fixture
def three_patients(reference_data, add_rows, make_patient):
    return add_rows(
        make_patient("Verdi", "Anna", dob=date(1975, 3, 1), estate_id=2),
        make_patient("Bianchi", "Luca", dob=date(1990, 7, 9)),
        make_patient("Rossi", "Mario", middle_name="Luigi", dob=date(1960, 12, 24)),
    )


def test_create_patient_assigns_id(client, reference_data):
    resp = client.post("/patients", json={**PATIENT, "id": 999})

    assert resp.status_code == 201
    assert resp.json() == {**PATIENT, "id": 1}
    assert resp.headers["location"].endswith("/patients/1")
    assert client.get("/patients/1").json() == {**PATIENT, "id": 1}


def test_create_patient_does_not_prevalidate_estate(client, reference_data):
    """No application-level check: the store's foreign key is what rejects it."""
    resp = client.post("/patients", json={**PATIENT, "estateId": 42})

    assert resp.status_code == 500
    assert resp.json()["detail"] == "An error occurred while saving the data. Please try again later."
    assert "FOREIGN KEY" not in resp.text
    assert client.get("/patients").json() == []


def test_get_missing_patient_returns_404(client):
    assert client.get("/patients/8").status_code == 404


def test_list_defaults_to_last_name(client, three_patients):
    items = client.get("/patients").json()

    assert [p["fullName"] for p in items] == ["Bianchi Luca", "Rossi Mario Luigi", "Verdi Anna"]
    assert items[2]["estateNumber"] == "2"
    assert items[0]["dateOfBirth"] == "1990-07-09"


def test_list_sorted_by_date_of_birth(client, three_patients):
    items = client.get("/patients", params={"sortBy": "DateOfBirth"}).json()
    assert [p["fullName"] for p in items] == [
        "Rossi Mario Luigi",
        "Verdi Anna",
        "Bianchi Luca",
    ]


def test_list_respects_page_size(client, three_patients):
    first = client.get("/patients", params={"pageSize": 2}).json()
    second = client.get("/patients", params={"pageSize": 2, "page": 2}).json()

    assert len(first) == 2
    assert [p["fullName"] for p in second] == ["Verdi Anna"]


def test_list_unknown_sort_key_uses_last_name(client, three_patients):
    default = client.get("/patients").json()
    assert client.get("/patients", params={"sortBy": "Height"}).json() == default


def test_update_patient(client, three_patients):
    patient_id = three_patients[1]
    body = {**PATIENT, "id": patient_id, "address": "Corso Italia 5", "estateId": 2}

    resp = client.put(f"/patients/{patient_id}", json=body)

    assert resp.status_code == 204
    assert client.get(f"/patients/{patient_id}").json() == body


def test_update_with_mismatched_id_returns_400(client, reference_data, add_rows, make_patient):
    """Scenario: path id 5, body id 6 -> 400, store unchanged."""
    ids = add_rows(*[make_patient(f"Patient{i}", "X") for i in range(6)])
    assert 5 in ids and 6 in ids
    before = client.get("/patients/5").json()

    resp = client.put("/patients/5", json={**PATIENT, "id": 6, "lastName": "Changed"})

    assert resp.status_code == 400
    assert client.get("/patients/5").json() == before
    assert client.get("/patients/6").json()["lastName"] == "Patient5"


def test_update_without_body_id_is_a_mismatch(client, three_patients):
    body = {k: v for k, v in PATIENT.items() if k != "id"}
    assert client.put("/patients/1", json=body).status_code == 400


def test_update_missing_patient_returns_404(client, reference_data):
    assert client.put("/patients/3", json={**PATIENT, "id": 3}).status_code == 404


def test_delete_patient(client, three_patients):
    assert client.delete("/patients/1").status_code == 204
    assert client.get("/patients/1").status_code == 404
    assert len(client.get("/patients").json()) == 2


def test_delete_missing_patient_is_404_every_time(client, three_patients):
    assert client.delete("/patients/50").status_code == 404
    assert client.delete("/patients/50").status_code == 404
    assert len(client.get("/patients").json()) == 3


def test_get_patient_unexpected_failure_returns_generic_500(client, monkeypatch):
    def boom(store, patient_id):
        raise RuntimeError("secret detail")

    monkeypatch.setattr(services, "get_patient", boom)
    resp = client.get("/patients/1")

    assert resp.status_code == 500
    assert resp.json()["detail"] == "An internal server error occurred. Please try again later."
    assert "secret" not in resp.text


def test_delete_commit_failure_returns_500_and_keeps_row(client, three_patients, monkeypatch):
    def reject(self):
        raise PersistenceError("database is locked")

    monkeypatch.setattr(ClinicStore, "commit", reject)
    resp = client.delete("/patients/1")

    assert resp.status_code == 500
    assert resp.json()["detail"] == "An error occurred while deleting the data. Please try again later."
    monkeypatch.undo()
    assert client.get("/patients/1").status_code == 200


def test_out_of_range_id_is_not_found(client, three_patients):
    assert client.get(f"/patients/{2**64}").status_code == 404
    assert client.delete(f"/patients/{2**64}").status_code == 404
    assert len(client.get("/patients").json()) == 3


def test_create_with_empty_gender_returns_422(client, reference_data):
    assert client.post("/patients", json={**PATIENT, "gender": ""}).status_code == 422
    assert client.get("/patients").json() == []
