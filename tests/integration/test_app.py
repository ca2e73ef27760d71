"""End-to-end tests for the admin engine routes."""

import pytest
from fastapi.testclient import TestClient

from admin_ui.app import build_container, create_app
from admin_ui.core.config import Config
from admin_ui.services.records import SAMPLE_ROWS, InMemoryRecordSource
from tests.helpers import cell_texts, parse_table


def dev_config(**overrides):
    values = {"ENVIRONMENT": "development", "ADMIN_PER_PAGE": 2, "ADMIN_MAX_PER_PAGE": 50}
    values.update(overrides)
    return Config(**values)


@pytest.fixture
def client():
    app = create_app(dev_config(), record_source=InMemoryRecordSource(SAMPLE_ROWS))
    return TestClient(app)


def test_products_listing(client):
    response = client.get("/admin/products")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")

    sections = parse_table(response.text)
    header = sections["thead"][0]
    assert cell_texts(header) == ["Name", "SKU", "Price", "Available", ""]
    assert [cell["tag"] for cell in header] == ["th", "th", "th", "th", "td"]

    # Ordered by name, two per page
    body = sections["tbody"]
    assert [cell_texts(row) for row in body] == [
        ["Canvas Cap", "CAP-004", "$19.99", "", "Edit"],
        ["Python Mug", "PMUG-002", "$12.50", "Feb 01, 2024", "Edit"],
    ]
    assert body[0][4]["links"][0]["href"] == "/admin/products/4"

    footer = sections["tfoot"]
    assert len(footer) == 1
    assert footer[0][0]["attrs"]["colspan"] == "5"
    assert 'href="/admin/products?page=2"' in response.text


def test_second_page_and_per_page(client):
    response = client.get("/admin/products", params={"page": 2, "per_page": 3})

    body = parse_table(response.text)["tbody"]
    assert [row[0]["text"] for row in body] == ["Solid Hoodie"]
    assert 'href="/admin/products?per_page=3&amp;page=1"' in response.text


def test_users_listing(client):
    response = client.get("/admin/users", params={"per_page": 10})

    sections = parse_table(response.text)
    assert cell_texts(sections["thead"][0]) == ["Email", "Name", "Created at"]
    assert [cell_texts(row) for row in sections["tbody"]] == [
        ["ann@example.com", "Ann Lee", "Jan 02, 2024"],
        ["bo@example.com", "Bo", "Feb 11, 2024"],
    ]


def test_page_past_the_end_renders_no_rows(client):
    response = client.get("/admin/users", params={"page": 9})

    assert response.status_code == 200
    sections = parse_table(response.text)
    assert len(sections["thead"]) == 1
    assert sections["tbody"] == []
    assert 'href="/admin/users?page=1" rel="prev"' in response.text
    assert "page=8" not in response.text


def test_layout_has_navigation(client):
    response = client.get("/admin/users")

    assert 'href="/admin/products"' in response.text
    assert '<a href="/admin/users" aria-current="page">Users</a>' in response.text
    assert "admin.css" in response.text


def test_admin_index(client):
    response = client.get("/admin")

    assert response.status_code == 200
    assert "Dashboard" in response.text
    assert 'href="/admin/products" class="text-blue-600 hover:underline">Products</a>' in response.text


def test_unknown_resource(client):
    response = client.get("/admin/orders")

    assert response.status_code == 404


def test_invalid_resource_name(client):
    response = client.get("/admin/Products")

    assert response.status_code == 400


@pytest.mark.parametrize("params", [{"page": 0}, {"per_page": 51}, {"per_page": 0}])
def test_invalid_paging(client, params):
    response = client.get("/admin/products", params=params)

    assert response.status_code == 400


def test_static_assets(client):
    response = client.get("/admin/assets/admin.css")

    assert response.status_code == 200
    assert "admin-nav" in response.text


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_health_reports_source_failure():
    class DownSource(InMemoryRecordSource):
        def ping(self):
            raise RuntimeError("database unreachable")

    app = create_app(dev_config(), record_source=DownSource({}))
    response = TestClient(app).get("/health")

    assert response.json()["status"] == "unhealthy"
    assert response.json()["error"] == "database unreachable"


def test_root(client):
    data = client.get("/").json()

    assert data["service"] == "Admin UI"
    assert data["endpoints"]["resources"] == {"products": "/admin/products", "users": "/admin/users"}


def test_unhandled_errors_return_500_json():
    class BrokenSource(InMemoryRecordSource):
        def fetch_page(self, resource, number, per_page):
            raise RuntimeError("boom")

    app = create_app(dev_config(), record_source=BrokenSource({}))
    response = TestClient(app, raise_server_exceptions=False).get(
        "/admin/users", headers={"origin": "http://localhost:8080"}
    )

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}
    assert response.headers["access-control-allow-origin"] == "http://localhost:8080"


def test_development_uses_sample_records():
    app = create_app(dev_config())

    assert isinstance(app.state.record_source, InMemoryRecordSource)


def test_build_container_registers_components():
    container = build_container()

    for key in ("ui/table", "ui/pagination", "ui/link"):
        assert key in container
