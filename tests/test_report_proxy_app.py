"""Behavior-focused tests for the report proxy HTTP surface."""

import re

import pytest
from starlette.testclient import TestClient

from ga_active_users.adapters.config import AppConfig
from ga_active_users.adapters.web import ReportProxyWebAdapter, preflight_headers
from tests.test_services import MockRealtimeReportRepository, make_service

ISO_TIMESTAMP = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")


@pytest.fixture
def repository() -> MockRealtimeReportRepository:
    return MockRealtimeReportRepository(active_users=5)


@pytest.fixture
def config() -> AppConfig:
    return AppConfig.for_testing(ga4_property_ids="123,456")


@pytest.fixture
def client(repository: MockRealtimeReportRepository, config: AppConfig) -> TestClient:
    service = make_service(repository, config.property_allow_list)
    adapter = ReportProxyWebAdapter(service, config)
    return TestClient(adapter.create_app())


def test_when_property_allowed_then_returns_count_json(
    client: TestClient, repository: MockRealtimeReportRepository
) -> None:
    """Given an allow-listed property, when requesting, then 200 JSON with cache headers is returned."""
    response = client.get("/", params={"propertyId": "123"})

    assert response.status_code == 200
    body = response.json()
    assert body["activeUsers"] == 5
    assert body["propertyId"] == "123"
    assert ISO_TIMESTAMP.match(body["timestamp"])
    assert response.headers["cache-control"] == "max-age=15, s-maxage=30"
    assert response.headers["access-control-allow-origin"] == "*"
    assert repository.calls == ["123"]


def test_when_property_missing_then_returns_400(
    client: TestClient, repository: MockRealtimeReportRepository
) -> None:
    """Given no propertyId, when requesting, then 400 plain text is returned without upstream call."""
    response = client.get("/")

    assert response.status_code == 400
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == "Missing propertyId parameter."
    assert response.headers["access-control-allow-origin"] == "*"
    assert repository.calls == []


def test_when_property_empty_then_returns_400(
    client: TestClient, repository: MockRealtimeReportRepository
) -> None:
    """Given an empty propertyId, when requesting, then 400 is returned."""
    response = client.get("/?propertyId=")

    assert response.status_code == 400
    assert repository.calls == []


def test_when_property_not_allowed_then_returns_500(
    repository: MockRealtimeReportRepository,
) -> None:
    """Given a property outside the allow-list, when requesting, then 500 plain text is returned."""
    config = AppConfig.for_testing(ga4_property_ids="123")
    service = make_service(repository, config.property_allow_list)
    client = TestClient(ReportProxyWebAdapter(service, config).create_app())

    response = client.get("/", params={"propertyId": "999"})

    assert response.status_code == 500
    assert response.text == "Invalid propertyId: 999."
    assert response.headers["access-control-allow-origin"] == "*"
    assert "cache-control" not in response.headers
    assert repository.calls == []


def test_when_invalid_status_configured_then_returns_400(
    repository: MockRealtimeReportRepository,
) -> None:
    """Given invalid properties configured as 400, when requesting one, then 400 is returned."""
    config = AppConfig.for_testing(ga4_property_ids="123", invalid_property_status_code=400)
    service = make_service(
        repository,
        config.property_allow_list,
        invalid_property_status_code=config.invalid_property_status_code,
    )
    client = TestClient(ReportProxyWebAdapter(service, config).create_app())

    response = client.get("/", params={"propertyId": "999"})

    assert response.status_code == 400


def test_when_upstream_fails_then_returns_500_with_message(config: AppConfig) -> None:
    """Given the analytics call fails, when requesting, then 500 carries the error message."""
    repository = MockRealtimeReportRepository(error=RuntimeError("quota exceeded"))
    service = make_service(repository, config.property_allow_list)
    client = TestClient(ReportProxyWebAdapter(service, config).create_app())

    response = client.get("/", params={"propertyId": "456"})

    assert response.status_code == 500
    assert response.text == "Error fetching GA4 data: quota exceeded"
    assert response.headers["access-control-allow-origin"] == "*"
    assert repository.calls == ["456"]


def test_when_preflight_then_returns_204_with_cors_headers(
    client: TestClient, repository: MockRealtimeReportRepository
) -> None:
    """Given an OPTIONS request, when handling it, then 204 with preflight headers is returned."""
    response = client.options("/")

    assert response.status_code == 204
    assert response.content == b""
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.headers["access-control-allow-methods"] == "GET"
    assert response.headers["access-control-allow-headers"] == "Content-Type"
    assert response.headers["access-control-max-age"] == "3600"
    assert repository.calls == []


def test_origin_header_is_not_duplicated(client: TestClient) -> None:
    """Given a response that already sets the origin header, when wrapping, then it appears once."""
    response = client.options("/")

    assert response.headers.get_list("access-control-allow-origin") == ["*"]


def test_health_route(client: TestClient) -> None:
    """Given the health route, when requesting it, then ok is returned."""
    response = client.get("/healthz")

    assert response.status_code == 200
    assert response.text == "ok"
    assert response.headers["access-control-allow-origin"] == "*"


def test_preflight_headers_follow_config() -> None:
    """Given a custom preflight max age, when building headers, then it is used."""
    config = AppConfig.for_testing(cors_max_age_seconds=60)

    assert preflight_headers(config)["Access-Control-Max-Age"] == "60"


def test_adapter_rejects_non_config() -> None:
    """Given a config of the wrong type, when building the adapter, then TypeError is raised."""
    with pytest.raises(TypeError, match="AppConfig"):
        ReportProxyWebAdapter(make_service(MockRealtimeReportRepository()), {})  # type: ignore[arg-type]
