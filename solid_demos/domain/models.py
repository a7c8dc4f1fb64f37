"""Domain models - invoices and the single-purpose collaborators that print and store them"""

import uuid
from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class Product:
    """Line item on an invoice"""

    price: float


@dataclass
class Invoice:
    """Invoice with a derived total; printing and storage live in their own classes"""

    products: Tuple[Product, ...]
    discount_percentage: float = 0.0
    id: str = field(default_factory=lambda: str(uuid.uuid4()), init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "products", tuple(self.products))

    def __setattr__(self, name: str, value) -> None:
        # Only the discount may change once a field has been set
        if name != "discount_percentage" and name in self.__dict__:
            raise AttributeError(f"Invoice.{name} is read-only")
        super().__setattr__(name, value)

    @property
    def total(self) -> float:
        subtotal = sum(product.price for product in self.products)
        discount_amount = subtotal * (self.discount_percentage / 100)
        return subtotal - discount_amount

    def print_invoice(self) -> None:
        InvoicePrinter(self).print_invoice()

    def save_invoice(self) -> None:
        InvoicePersistence(self).save_invoice()


@dataclass
class InvoicePrinter:
    """Formats an invoice for the console"""

    invoice: Invoice

    def print_invoice(self) -> None:
        print("------------------------")
        print(f"Invoice ID : {self.invoice.id}")
        print(f"Total Cost ${self.invoice.total:.2f}")
        print(f"Discounts: {self.invoice.discount_percentage}")
        print("------------------------")


@dataclass
class InvoicePersistence:
    """Stores an invoice (placeholder, nothing is written)"""

    invoice: Invoice

    def save_invoice(self) -> None:
        print("Save to data base")


class SquarableInt(int):
    """int extended with squared(); int itself and its callers are untouched"""

    def squared(self) -> int:
        return self * self
