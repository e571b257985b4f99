"""Prometheus metrics for the Sistema Financiero service.

Metrics are organized into two categories:

Business Metrics (for the lending desk):
- finanzas_contract_operations_total: Contract creates/deletes by outcome
- finanzas_orphan_cleanup_total: Clients/avales removed with their last contract
- finanzas_contract_principal: Principal of newly created contracts
- finanzas_transactions_recorded_total: Ledger entries by type

Technical Metrics (for Engineering/SRE):
- finanzas_transaction_failures_total: Rolled back store transactions
- finanzas_http_requests_total: HTTP requests by endpoint/status
- finanzas_http_request_latency_seconds: HTTP request latency
"""

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics
# =============================================================================

contract_operations_total = Counter(
    "finanzas_contract_operations_total",
    "Contract lifecycle operations",
    ["operation", "outcome"],  # create/delete, success/failure/not_found
)

orphan_cleanup_total = Counter(
    "finanzas_orphan_cleanup_total",
    "Clients and avales deleted together with their last contract",
    ["role"],  # client, aval
)

contract_principal = Histogram(
    "finanzas_contract_principal",
    "Principal amount of newly created contracts",
    buckets=[1000, 2500, 5000, 10000, 25000, 50000, 100000, 250000],
)

transactions_recorded_total = Counter(
    "finanzas_transactions_recorded_total",
    "Ledger transactions recorded",
    ["type"],  # income, expense
)


# =============================================================================
# Technical Metrics
# =============================================================================

transaction_failures_total = Counter(
    "finanzas_transaction_failures_total",
    "Store transactions rolled back because a statement failed",
    ["operation"],
)

http_requests_total = Counter(
    "finanzas_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "finanzas_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_contract_created(amount: float) -> None:
    """Record a successful contract creation."""
    contract_operations_total.labels(operation="create", outcome="success").inc()
    contract_principal.observe(amount)


def record_contract_deleted(client_removed: bool, aval_removed: bool) -> None:
    """Record a successful contract deletion and any orphan cleanup."""
    contract_operations_total.labels(operation="delete", outcome="success").inc()
    if client_removed:
        orphan_cleanup_total.labels(role="client").inc()
    if aval_removed:
        orphan_cleanup_total.labels(role="aval").inc()


def record_contract_failure(operation: str, outcome: str = "failure") -> None:
    """Record a failed contract operation."""
    contract_operations_total.labels(operation=operation, outcome=outcome).inc()


def record_transaction_recorded(transaction_type: str) -> None:
    """Record a new ledger transaction."""
    transactions_recorded_total.labels(type=transaction_type).inc()


def record_transaction_failure(operation: str) -> None:
    """Record a rolled back store transaction."""
    transaction_failures_total.labels(operation=operation).inc()


def record_http_request(method: str, endpoint: str, status: int, duration: float) -> None:
    """Record an HTTP request."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=str(status)).inc()
    http_request_latency.labels(method=method, endpoint=endpoint).observe(duration)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST
