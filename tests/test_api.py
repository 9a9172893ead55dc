"""
TimeClock — HTTP API Tests
==========================

Drives the FastAPI router through `TestClient`. The lifespan is not entered;
the autouse `database` fixture provides the schema.

What we test:
    ✅ customer create / read / lookup / replace / contact update / delete
    ✅ persistence failures mapped to 404 / 409 / 422
    ✅ jobs attach existing customers and pays, filters, status update
    ✅ decimal amounts serialised as strings
"""

import pytest
from fastapi.testclient import TestClient

from timeclock.main import app


@pytest.fixture
def client():
    return TestClient(app)


def _create_customer(client, name="Acme Ltd.", contact="Jane Doe"):
    response = client.post("/customers", json={"name": name, "contact": contact})
    assert response.status_code == 201
    return response.json()


def _job_payload(**overrides):
    payload = {"developer_id": 7, "order_number": 1001, "project_name": "timeclock", "status": "OPEN"}
    payload.update(overrides)
    return payload


class TestCustomerRoutes:

    def test_create_and_read(self, client):
        created = _create_customer(client)

        assert created["version"] == 1
        assert created["audit"]["created_by"] == "test-suite"

        response = client.get(f"/customers/{created['customer_id']}")
        assert response.status_code == 200
        assert response.json()["name"] == "Acme Ltd."

        assert [c["customer_id"] for c in client.get("/customers").json()] == [created["customer_id"]]

    def test_unknown_customer_is_404(self, client):
        assert client.get("/customers/42").status_code == 404
        assert client.patch("/customers/42/contact", json={"contact": "x"}).status_code == 404
        assert client.delete("/customers/42").status_code == 404

    def test_lookup_by_name(self, client):
        created = _create_customer(client, name="Globex")

        response = client.get("/customers/by-name/Globex")
        assert response.status_code == 200
        assert response.json()["customer_id"] == created["customer_id"]

        assert client.get("/customers/by-name/Nobody").status_code == 404

    def test_ambiguous_name_is_409(self, client):
        _create_customer(client, name="Twin")
        _create_customer(client, name="Twin")

        response = client.get("/customers/by-name/Twin")
        assert response.status_code == 409
        assert response.json()["error"] == "non_unique"

    def test_replace_with_stale_version_is_409(self, client):
        created = _create_customer(client)
        url = f"/customers/{created['customer_id']}"

        first = client.put(url, json={"name": "Acme", "contact": "A", "version": 1})
        assert first.status_code == 200
        assert first.json()["version"] == 2

        stale = client.put(url, json={"name": "Acme", "contact": "B", "version": 1})
        assert stale.status_code == 409
        assert stale.json()["error"] == "conflict"
        assert client.get(url).json()["contact"] == "A"

    def test_contact_update_and_delete(self, client):
        created = _create_customer(client)
        url = f"/customers/{created['customer_id']}"

        patched = client.patch(f"{url}/contact", json={"contact": "John Roe"})
        assert patched.status_code == 200
        assert patched.json()["contact"] == "John Roe"
        assert patched.json()["name"] == "Acme Ltd."

        assert client.delete(url).status_code == 204
        assert client.get(url).status_code == 404

    def test_invalid_body_is_422(self, client):
        assert client.post("/customers", json={"contact": "no name"}).status_code == 422


class TestPayRoutes:

    def test_amounts_are_strings(self, client):
        response = client.post("/pays", json={"hourly_rate": "25.50", "working_hours": "8", "currency": "eur"})

        assert response.status_code == 201
        body = response.json()
        assert body["hourly_rate"] == "25.50"
        assert body["currency"] == "EUR"
        assert body["total"] == "204.00"

    def test_replace_and_delete(self, client):
        pay_id = client.post("/pays", json={"hourly_rate": "10"}).json()["pay_id"]

        replaced = client.put(f"/pays/{pay_id}", json={"hourly_rate": "12", "working_hours": "1",
                                                      "currency": "HUF", "version": 1})
        assert replaced.status_code == 200
        assert replaced.json()["version"] == 2

        assert client.delete(f"/pays/{pay_id}").status_code == 204
        assert client.get(f"/pays/{pay_id}").status_code == 404


class TestJobRoutes:

    def test_create_with_associations(self, client):
        customer = _create_customer(client)
        pay = client.post("/pays", json={"hourly_rate": "20"}).json()

        response = client.post("/jobs", json=_job_payload(customer_id=customer["customer_id"], pay_id=pay["pay_id"]))

        assert response.status_code == 201
        job = response.json()
        assert job["customer"]["customer_id"] == customer["customer_id"]
        assert job["pay"]["pay_id"] == pay["pay_id"]

        fetched = client.get(f"/jobs/{job['job_id']}").json()
        assert fetched["customer"]["name"] == "Acme Ltd."

    def test_unknown_customer_is_404(self, client):
        response = client.post("/jobs", json=_job_payload(customer_id=99))
        assert response.status_code == 404
        assert client.get("/jobs").json() == []

    def test_blank_status_is_422(self, client):
        response = client.post("/jobs", json=_job_payload(status="   "))
        assert response.status_code == 422
        assert response.json()["field"] == "status"

    def test_filters_and_status_update(self, client):
        first = client.post("/jobs", json=_job_payload(developer_id=1)).json()
        second = client.post("/jobs", json=_job_payload(developer_id=2, project_name="other")).json()

        patched = client.patch(f"/jobs/{first['job_id']}/status", json={"status": "DONE"})
        assert patched.status_code == 200
        assert patched.json()["status"] == "DONE"

        def ids(**params):
            return [j["job_id"] for j in client.get("/jobs", params=params).json()]

        assert ids(developer_id=2) == [second["job_id"]]
        assert ids(status="DONE") == [first["job_id"]]
        assert ids(project_name="other") == [second["job_id"]]
        assert sorted(ids()) == sorted([first["job_id"], second["job_id"]])

    def test_delete_referenced_customer_is_409(self, client):
        customer = _create_customer(client)
        job = client.post("/jobs", json=_job_payload(customer_id=customer["customer_id"])).json()

        response = client.delete(f"/customers/{customer['customer_id']}")
        assert response.status_code == 409
        assert response.json()["error"] == "constraint_violation"

        assert client.delete(f"/jobs/{job['job_id']}").status_code == 204
        assert client.delete(f"/customers/{customer['customer_id']}").status_code == 204
