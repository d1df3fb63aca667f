"""Tests for the HTTP endpoints."""
import asyncio
import pytest
import uuid
from fastapi.testclient import TestClient

from yatra.api.dependencies import get_storage
from yatra.main import create_app
from yatra.models import InsertPackage
from yatra.services.storage import MemStorage


VALID_CONTACT = {
    "name": "Saravanan",
    "email": "saravanan@example.com",
    "phone": "9876543210",
    "message": "Need a quote for the Kashi Nepal package for my parents.",
    "package_interest": "Kashi Nepal",
}


class BrokenStorage(MemStorage):
    """Store whose reads and writes always fail."""

    async def get_all_packages(self):
        raise RuntimeError("boom")

    async def get_package(self, package_id):
        raise RuntimeError("boom")

    async def get_all_gallery_items(self):
        raise RuntimeError("boom")

    async def submit_contact_form(self, form):
        raise RuntimeError("boom")


@pytest.fixture
def storage():
    return MemStorage()


@pytest.fixture
def client(storage):
    app = create_app(storage=storage)
    return TestClient(app)


class TestCatalogEndpoints:
    """Test the read-only catalog endpoints."""

    def test_list_packages(self, client):
        """Fresh instance lists the three sample packages."""
        response = client.get("/api/packages")

        assert response.status_code == 200
        packages = response.json()
        assert len(packages) == 3
        yatra = next(p for p in packages if p["title"] == "Kashi Allahabad Ayodhya Yatra")
        assert yatra["price"] == 15000
        assert set(yatra) == {
            "id", "title", "duration", "image", "description",
            "itinerary", "highlights", "price",
        }

    def test_get_package(self, client):
        """A listed package can be fetched by id."""
        package = client.get("/api/packages").json()[1]

        response = client.get(f"/api/packages/{package['id']}")

        assert response.status_code == 200
        assert response.json() == package

    def test_get_unknown_package(self, client):
        """An id never issued by the store returns 404 with an error."""
        response = client.get(f"/api/packages/{uuid.uuid4()}")

        assert response.status_code == 404
        assert response.json() == {"error": "Package not found"}

    def test_list_testimonials(self, client):
        response = client.get("/api/testimonials")

        assert response.status_code == 200
        assert [t["name"] for t in response.json()] == [
            "Meghavarman King",
            "Manaswini Chowdary",
            "Saravanan Shanmugam",
        ]

    def test_list_services(self, client):
        response = client.get("/api/services")

        assert response.status_code == 200
        assert [s["icon"] for s in response.json()] == ["car", "eye", "users", "ship", "heart"]

    def test_list_gallery(self, client):
        """Gallery has 16 items with destinations cycling in index order."""
        destinations = ["Kashi", "Varanasi", "Nepal", "Ayodhya", "Allahabad", "Gaya"]

        response = client.get("/api/gallery")

        assert response.status_code == 200
        items = response.json()
        assert len(items) == 16
        assert [item["destination"] for item in items] == [
            destinations[i % 6] for i in range(16)
        ]

    def test_created_package_is_served(self, client, storage):
        """Packages added to the injected store show up over HTTP."""
        created = asyncio.run(storage.create_package(InsertPackage(
            title="Gaya Bodhgaya",
            duration="1N/2D",
            image="/gaya.jpg",
            description="Pinda Dhan and the Mahabodhi Temple.",
            price=8000,
        )))

        response = client.get(f"/api/packages/{created.id}")

        assert response.status_code == 200
        assert response.json()["title"] == "Gaya Bodhgaya"
        assert len(client.get("/api/packages").json()) == 4


class TestContactEndpoint:
    """Test POST /api/contact."""

    def test_valid_submission(self, client, storage):
        """A valid form is accepted and logged exactly once."""
        before = len(storage.contact_submissions)

        response = client.post("/api/contact", json=VALID_CONTACT)

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": "Contact form submitted successfully",
        }
        assert len(storage.contact_submissions) == before + 1
        assert storage.contact_submissions[-1].package_interest == "Kashi Nepal"

    def test_missing_field(self, client, storage):
        """Missing required field returns 400 with issue details."""
        body = {k: v for k, v in VALID_CONTACT.items() if k != "email"}

        response = client.post("/api/contact", json=body)

        assert response.status_code == 400
        data = response.json()
        assert data["error"] == "Validation failed"
        assert len(data["details"]) > 0
        assert data["details"][0]["path"] == ["email"]
        assert data["details"][0]["code"] == "missing"
        assert storage.contact_submissions == ()

    def test_invalid_values(self, client):
        """Every violated constraint is reported."""
        body = {**VALID_CONTACT, "phone": "123", "message": "short"}

        response = client.post("/api/contact", json=body)

        assert response.status_code == 400
        paths = {tuple(issue["path"]) for issue in response.json()["details"]}
        assert paths == {("phone",), ("message",)}

    def test_malformed_json(self, client, storage):
        """A body that is not JSON is a validation failure too."""
        response = client.post(
            "/api/contact",
            content="name=Saravanan",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Validation failed"
        assert storage.contact_submissions == ()


class TestErrorHandling:
    """Test translation of unexpected failures."""

    @pytest.fixture
    def broken_client(self, storage):
        app = create_app(storage=storage)
        broken = BrokenStorage(seed=False)
        app.dependency_overrides[get_storage] = lambda: broken
        return TestClient(app)

    @pytest.mark.parametrize("path, message", [
        ("/api/packages", "Failed to fetch packages"),
        (f"/api/packages/{uuid.uuid4()}", "Failed to fetch package"),
        ("/api/gallery", "Failed to fetch gallery items"),
    ])
    def test_read_failures(self, broken_client, path, message):
        """Store errors become a 500 with a generic message."""
        response = broken_client.get(path)

        assert response.status_code == 500
        assert response.json() == {"error": message}

    def test_submit_failure(self, broken_client):
        response = broken_client.post("/api/contact", json=VALID_CONTACT)

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to submit contact form"}

    def test_unknown_route(self, client):
        response = client.get("/api/bookings")

        assert response.status_code == 404
        assert "error" in response.json()


class TestHealth:
    """Test the health endpoint."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["collections"]["packages"] == 3
        assert data["collections"]["gallery_items"] == 16

    def test_apps_do_not_share_state(self, client):
        """Each application gets its own store."""
        other = TestClient(create_app(storage=MemStorage(seed=False)))

        assert other.get("/api/packages").json() == []
        assert len(client.get("/api/packages").json()) == 3
