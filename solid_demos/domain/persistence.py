"""Swappable invoice persistence backends"""

import logging
from abc import ABC, abstractmethod

from solid_demos.domain.models import Invoice
from solid_demos.infrastructure.observability.metrics import record_invoice_save


class PersistenceCapability(ABC):
    """Anything that can store an invoice"""

    store_name: str

    @abstractmethod
    def save(self, invoice: Invoice) -> None:
        ...


class CoreDataPersistence(PersistenceCapability):
    store_name = "Core Data"

    def save(self, invoice: Invoice) -> None:
        print(f"Invoice ID {invoice.id} saved to {self.store_name}")
        record_invoice_save(self.store_name)


class DatabasePersistence(PersistenceCapability):
    store_name = "database"

    def save(self, invoice: Invoice) -> None:
        print(f"Invoice ID {invoice.id} saved to {self.store_name}")
        record_invoice_save(self.store_name)


class PersistableInvoice:
    """Forwards saves to whichever backend it was given"""

    def __init__(self, persistence: PersistenceCapability):
        self.persistence = persistence

    def save(self, invoice: Invoice) -> None:
        logging.info(
            "Saving invoice",
            extra={"invoice_id": invoice.id, "store": type(self.persistence).__name__},
        )
        self.persistence.save(invoice)
