"""Payment providers and the initiator that depends only on the PaymentMethod abstraction"""

from abc import ABC, abstractmethod

from solid_demos.infrastructure.observability.metrics import record_payment


class PaymentMethod(ABC):
    """Abstract payment method"""

    name: str

    @abstractmethod
    def execute(self, amount: float) -> None:
        ...


class _ConfirmingPaymentMethod(PaymentMethod):
    """Provider that confirms on stdout; subclasses only supply a name"""

    def execute(self, amount: float) -> None:
        print(f"Payment success for {self.name} {amount}")
        record_payment(self.name)


class DebitCard(_ConfirmingPaymentMethod):
    name = "Debit Card"


class ApplePay(_ConfirmingPaymentMethod):
    name = "Apple Pay"


class Stripe(_ConfirmingPaymentMethod):
    name = "Stripe"


class PaymentInitiator:
    """High-level payment entry point. Knows nothing about concrete providers."""

    def __init__(self, payment: PaymentMethod):
        self.payment = payment

    def make_payment(self, amount: float) -> None:
        self.payment.execute(amount)
