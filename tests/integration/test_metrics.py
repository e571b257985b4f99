"""
Integration tests for metrics tracking.

These tests verify:
1. Metrics endpoint returns valid Prometheus format
2. Contract operations and orphan cleanup are counted
3. HTTP requests are recorded per route template
"""

import pytest
from httpx import AsyncClient

from src.core.metrics import REGISTRY


def sample(name: str, labels: dict) -> float:
    return REGISTRY.get_sample_value(name, labels) or 0.0


# =============================================================================
# Metrics Endpoint Tests
# =============================================================================

class TestMetricsEndpoint:
    """Tests for GET /metrics endpoint."""

    @pytest.mark.asyncio
    async def test_metrics_endpoint_returns_prometheus_format(self, client: AsyncClient):
        response = await client.get("/metrics")

        assert response.status_code == 200
        content_type = response.headers.get("content-type", "")
        assert "text/plain" in content_type or "text/openmetrics" in content_type
        assert "# HELP" in response.text

    @pytest.mark.asyncio
    async def test_metrics_include_service_metrics(self, client: AsyncClient):
        response = await client.get("/metrics")

        content = response.text
        assert "finanzas_contract_operations_total" in content
        assert "finanzas_http_requests_total" in content


# =============================================================================
# Contract Metrics Tests
# =============================================================================

class TestContractMetrics:

    @pytest.mark.asyncio
    async def test_create_and_delete_are_counted(
        self,
        client: AsyncClient,
        contract_payload: dict,
    ):
        created_before = sample(
            "finanzas_contract_operations_total",
            {"operation": "create", "outcome": "success"},
        )
        deleted_before = sample(
            "finanzas_contract_operations_total",
            {"operation": "delete", "outcome": "success"},
        )
        clients_before = sample("finanzas_orphan_cleanup_total", {"role": "client"})
        avales_before = sample("finanzas_orphan_cleanup_total", {"role": "aval"})

        created = (await client.post("/v1/contracts", json=contract_payload)).json()["data"]
        await client.delete(f"/v1/contracts/{created['id']}")

        assert sample(
            "finanzas_contract_operations_total",
            {"operation": "create", "outcome": "success"},
        ) == created_before + 1
        assert sample(
            "finanzas_contract_operations_total",
            {"operation": "delete", "outcome": "success"},
        ) == deleted_before + 1
        assert sample("finanzas_orphan_cleanup_total", {"role": "client"}) == clients_before + 1
        assert sample("finanzas_orphan_cleanup_total", {"role": "aval"}) == avales_before + 1

    @pytest.mark.asyncio
    async def test_delete_unknown_counted_as_not_found(self, client: AsyncClient):
        labels = {"operation": "delete", "outcome": "not_found"}
        before = sample("finanzas_contract_operations_total", labels)

        await client.delete("/v1/contracts/4040")

        assert sample("finanzas_contract_operations_total", labels) == before + 1

    @pytest.mark.asyncio
    async def test_http_requests_use_route_template(self, client: AsyncClient):
        labels = {"method": "GET", "endpoint": "/v1/contracts/{contract_id}", "status": "404"}
        before = sample("finanzas_http_requests_total", labels)

        await client.get("/v1/contracts/31")
        await client.get("/v1/contracts/32")

        assert sample("finanzas_http_requests_total", labels) == before + 2


# =============================================================================
# Health Tests
# =============================================================================

class TestHealth:

    @pytest.mark.asyncio
    async def test_health(self, client: AsyncClient):
        response = await client.get("/v1/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["service"] == "sistema-financiero"

    @pytest.mark.asyncio
    async def test_request_id_is_echoed(self, client: AsyncClient):
        response = await client.get("/v1/health", headers={"X-Request-ID": "trace-123"})

        assert response.headers["X-Request-ID"] == "trace-123"
