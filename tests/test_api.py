"""HTTP surface tests: routers wired to repositories on temporary files."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import json
import pytest
from fastapi.testclient import TestClient
from app.config import settings
from app.database import get_customer_repository, get_employee_repository, get_vehicle_repository
from app.main import app
from app.services.customer_service import CustomerRepository
from app.services.employee_service import EmployeeRepository
from app.services.vehicle_service import VehicleRepository
from app.storage import ensure_storage_file

VEHICLE = {
    "PlateNumber": "123ABC", "Make": "Toyota", "Model": "Corolla", "Year": 2019,
    "FuelType": "petrol", "Gearbox": "Manual", "Color": "Blue", "Body": "Touring",
}
CUSTOMER = {
    "FirstName": "John", "LastName": "Smith", "PersonalID": 12345678901,
    "PhoneNumber": "5551234", "Email": "john@x.com",
}
EMPLOYEE = {
    "FirstName": "Mari", "LastName": "Tamm", "PersonalID": 48001010000, "DateOfBirth": "01.01.1980",
    "Email": "mari.tamm@fleet.ee", "PhoneNumber": "55512345", "Address": "Tartu mnt 1",
}


@pytest.fixture
def client(tmp_path):
    vehicles = VehicleRepository(str(tmp_path / "vehicles.json"))
    customers = CustomerRepository(str(tmp_path / "customers.json"), vehicles=vehicles)
    employees = EmployeeRepository(str(tmp_path / "employees.json"))
    ensure_storage_file(vehicles.store, {})
    ensure_storage_file(customers.store, [])
    ensure_storage_file(employees.store, [])

    app.dependency_overrides[get_vehicle_repository] = lambda: vehicles
    app.dependency_overrides[get_customer_repository] = lambda: customers
    app.dependency_overrides[get_employee_repository] = lambda: employees
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestVehiclesAPI:
    def test_add_and_list(self, client):
        resp = client.post("/api/v1/vehicles", json=VEHICLE)
        assert resp.status_code == 200
        assert resp.json()["PlateNumber"] == "123ABC"

        listed = client.get("/api/v1/vehicles").json()
        assert listed["123ABC"]["FuelType"] == "petrol"

    def test_duplicate_is_conflict(self, client):
        client.post("/api/v1/vehicles", json=VEHICLE)
        resp = client.post("/api/v1/vehicles", json=VEHICLE)
        assert resp.status_code == 409
        assert "already in the storage" in resp.json()["detail"]

    def test_invalid_enum_is_bad_request(self, client):
        resp = client.post("/api/v1/vehicles", json=dict(VEHICLE, FuelType="petrolx"))
        assert resp.status_code == 400

    def test_edit_no_change(self, client):
        client.post("/api/v1/vehicles", json=VEHICLE)
        assert client.put("/api/v1/vehicles", json=dict(VEHICLE, Color="Red")).status_code == 200
        resp = client.put("/api/v1/vehicles", json=dict(VEHICLE, Color="Red"))
        assert resp.status_code == 400
        assert resp.json()["detail"] == "new data not detected"

    def test_lookup_and_delete(self, client):
        client.post("/api/v1/vehicles", json=VEHICLE)
        assert client.get("/api/v1/vehicles/lookup/123ABC").json()["registered"] is True
        assert client.delete("/api/v1/vehicles/123ABC").status_code == 200
        assert client.get("/api/v1/vehicles/lookup/123ABC").json()["registered"] is False
        assert client.delete("/api/v1/vehicles/123ABC").status_code == 404


class TestCustomersAPI:
    def test_add_rent_return(self, client):
        client.post("/api/v1/vehicles", json=VEHICLE)
        created = client.post("/api/v1/customers", json=CUSTOMER).json()
        assert created["RentedVehicles"] == []
        assert created["CreatedAt"] is not None

        resp = client.post("/api/v1/customers/12345678901/vehicles", json=VEHICLE)
        assert resp.status_code == 200
        assert [v["PlateNumber"] for v in resp.json()["RentedVehicles"]] == ["123ABC"]

        assert client.delete("/api/v1/customers/12345678901/vehicles/123ABC").status_code == 200
        assert client.get("/api/v1/customers").json()[0]["RentedVehicles"] == []

    def test_return_plate_missing_from_fleet(self, client):
        client.post("/api/v1/customers", json=CUSTOMER)
        resp = client.delete("/api/v1/customers/12345678901/vehicles/NOPE")
        assert resp.status_code == 404

    def test_rent_unknown_vehicle(self, client):
        client.post("/api/v1/customers", json=CUSTOMER)
        resp = client.post("/api/v1/customers/12345678901/vehicles", json=VEHICLE)
        assert resp.status_code == 404

    def test_partial_edit(self, client):
        client.post("/api/v1/customers", json=CUSTOMER)
        resp = client.put("/api/v1/customers", json={"PersonalID": 12345678901, "LastName": "Smithson"})
        assert resp.status_code == 200
        body = resp.json()
        assert (body["FirstName"], body["LastName"]) == ("John", "Smithson")
        assert body["LastEditedAt"] is not None

    def test_duplicate_and_unknown(self, client):
        client.post("/api/v1/customers", json=CUSTOMER)
        assert client.post("/api/v1/customers", json=CUSTOMER).status_code == 409
        assert client.delete("/api/v1/customers/99999999999").status_code == 404


class TestEmployeesAPI:
    def test_crud(self, client):
        assert client.post("/api/v1/employees", json=EMPLOYEE).status_code == 200
        resp = client.put("/api/v1/employees", json={
            "PersonalID": 48001010000, "Email": "mari@rent.ee", "PhoneNumber": "5559999", "Address": "Narva mnt 5",
        })
        assert resp.status_code == 200
        assert resp.json()["Address"] == "Narva mnt 5"
        assert client.delete("/api/v1/employees/48001010000").status_code == 200
        assert client.get("/api/v1/employees").json() == []

    def test_invalid_date_of_birth(self, client):
        resp = client.post("/api/v1/employees", json=dict(EMPLOYEE, DateOfBirth="1980-01-01"))
        assert resp.status_code == 400
        assert resp.json()["detail"] == "invalid input: wrong date format"


class TestHealth:
    def test_all_collections_ok(self, client):
        body = client.get("/api/v1/health").json()
        assert body["status"] == "ok"
        assert body["collections"]["vehicles"] == {"status": "ok", "records": 0}

    def test_corrupt_collection_degrades(self, client, tmp_path):
        (tmp_path / "employees.json").write_text("{broken", encoding="utf-8")
        body = client.get("/api/v1/health").json()
        assert body["status"] == "degraded"
        assert body["collections"]["employees"]["status"].startswith("error:")


class TestAPIKey:
    def test_key_required_when_configured(self, client, monkeypatch):
        monkeypatch.setattr(settings, "API_KEY", "s3cret")

        assert client.get("/api/v1/vehicles").status_code == 401
        assert client.get("/api/v1/vehicles", headers={"X-API-Key": "wrong"}).status_code == 401
        assert client.get("/api/v1/vehicles", headers={"X-API-Key": "s3cret"}).status_code == 200
        assert client.get("/api/v1/vehicles?api_key=s3cret").status_code == 200
        assert client.get("/api/v1/health").status_code == 200

    def test_open_when_no_key(self, client, monkeypatch):
        monkeypatch.setattr(settings, "API_KEY", None)
        assert client.get("/api/v1/vehicles").status_code == 200


class TestStartup:
    @pytest.fixture
    def fresh_repositories(self, tmp_path, monkeypatch):
        monkeypatch.setattr(settings, "DATA_DIR", str(tmp_path / "data"))
        monkeypatch.setattr(settings, "API_KEY", None)
        for provider in (get_vehicle_repository, get_customer_repository, get_employee_repository):
            provider.cache_clear()
        yield tmp_path / "data"
        for provider in (get_vehicle_repository, get_customer_repository, get_employee_repository):
            provider.cache_clear()

    def test_startup_creates_empty_collections(self, fresh_repositories):
        with TestClient(app) as client:
            assert json.loads((fresh_repositories / "vehicles.json").read_text(encoding="utf-8")) == {}
            assert json.loads((fresh_repositories / "customers.json").read_text(encoding="utf-8")) == []
            assert json.loads((fresh_repositories / "employees.json").read_text(encoding="utf-8")) == []
            assert client.get("/api/v1/customers").json() == []

    def test_startup_keeps_existing_collections(self, fresh_repositories):
        fresh_repositories.mkdir()
        (fresh_repositories / "customers.json").write_text(
            '[{"FirstName": "John", "PersonalID": 12345678901}]', encoding="utf-8")

        with TestClient(app) as client:
            customers = client.get("/api/v1/customers").json()

        assert [c["PersonalID"] for c in customers] == [12345678901]
