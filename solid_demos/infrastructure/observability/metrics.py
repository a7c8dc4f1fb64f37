"""Prometheus metrics for payments, invoice saves, and user service errors"""

from prometheus_client import Counter

payment_counter = Counter(
    "solid_payments_total",
    "Payments executed",
    ["provider"],  # Debit Card | Apple Pay | Stripe
)

invoice_save_counter = Counter(
    "solid_invoice_saves_total",
    "Invoices saved",
    ["store"],
)

api_error_counter = Counter(
    "solid_api_errors_total",
    "User service errors reported",
    ["kind"],  # invalidURL | invalidResponse | invalidStatusCode
)


def record_payment(provider: str) -> None:
    payment_counter.labels(provider=provider).inc()


def record_invoice_save(store: str) -> None:
    invoice_save_counter.labels(store=store).inc()


def record_api_error(kind: str) -> None:
    api_error_counter.labels(kind=kind).inc()
