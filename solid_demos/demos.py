"""The five SOLID demonstrations. Each is independent and prints its own section."""

import asyncio
from typing import Callable, Set, Tuple

from solid_demos.domain.models import Invoice, Product, SquarableInt
from solid_demos.domain.payments import ApplePay, PaymentInitiator
from solid_demos.domain.persistence import DatabasePersistence, PersistableInvoice
from solid_demos.domain.taps import BasicButton, FullButton
from solid_demos.domain.users import MockUserService, UserService

# Strong references to fire-and-forget tasks; the event loop only keeps weak ones
_background_tasks: Set[asyncio.Task] = set()


def _sample_invoice() -> Invoice:
    return Invoice(products=(Product(price=99.99), Product(price=9.99), Product(price=24.99)))


def run_invoice_demo() -> None:
    """Single responsibility: Invoice computes, printer prints, persistence stores"""
    print("-------- Single responsibility principle ----------")
    invoice = _sample_invoice()
    invoice.print_invoice()
    invoice.save_invoice()


def run_extension_demo() -> None:
    """Open/Closed: extend int and swap storage without editing existing code"""
    print("-------- Open/Closed Principle ----------")
    num = SquarableInt(2)
    print(f"{num} squared is {num.squared()}")

    database_persistence = PersistableInvoice(DatabasePersistence())
    database_persistence.save(_sample_invoice())


def run_substitution_demo(service: UserService | None = None) -> asyncio.Task:
    """
    Liskov substitution: start fetch_user on any UserService without waiting.

    Defaults to MockUserService; HttpUserService from
    solid_demos.infrastructure.clients.users drops in unchanged. Must be
    called with a running event loop. The task is returned for callers that
    want it; the demo runner ignores it.
    """
    print("-------- Liskov Substitution Principle (LSP) ----------")
    service = service or MockUserService()
    task = asyncio.create_task(service.fetch_user())
    _background_tasks.add(task)
    task.add_done_callback(_background_tasks.discard)
    return task


def run_segregation_demo() -> None:
    """Interface segregation: buttons implement only the gestures they support"""
    print("-------- Interface segregation principle (ISP) ----------")
    FullButton().long_tap()
    BasicButton().single_tap()


def run_inversion_demo() -> None:
    """Dependency inversion: the initiator is handed its payment method"""
    print("-------- Dependency Inversion Principle (DIP) ----------")
    apple_pay = PaymentInitiator(ApplePay())
    apple_pay.make_payment(200)


DEMOS: Tuple[Callable[[], object], ...] = (
    run_invoice_demo,
    run_extension_demo,
    run_substitution_demo,
    run_segregation_demo,
    run_inversion_demo,
)
