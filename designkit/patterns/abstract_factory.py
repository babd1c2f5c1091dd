"""Abstract Factory pattern.

A storefront needs a matching family of parts: a payment processor, a
shipping calculator and an invoice formatter that all agree on region
rules. ``StorefrontKit`` names that capability set as a Protocol. Each kit
implements it independently, without a shared base class, and the kit in
use is chosen by configuration (``DESIGNKIT_STOREFRONT_REGION``).
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Protocol

from designkit.config import settings
from designkit.registry import FactoryRegistry

CENT = Decimal("0.01")


class PaymentProcessor(Protocol):
    def charge(self, amount: Decimal) -> str: ...


class ShippingCalculator(Protocol):
    def cost(self, weight_kg: Decimal) -> Decimal: ...


class InvoiceFormatter(Protocol):
    def format(self, order_id: int, amount: Decimal) -> str: ...


class StorefrontKit(Protocol):
    region: str

    def payment_processor(self) -> PaymentProcessor: ...

    def shipping_calculator(self) -> ShippingCalculator: ...

    def invoice_formatter(self) -> InvoiceFormatter: ...


# --- Domestic family --------------------------------------------------------

class CardPayment:
    def charge(self, amount: Decimal) -> str:
        return f"Charged ${amount:.2f} to card"


class FlatRateShipping:
    def __init__(self, rate: Decimal = Decimal("5.00")):
        self.rate = rate

    def cost(self, weight_kg: Decimal) -> Decimal:
        return self.rate


class PlainInvoice:
    def format(self, order_id: int, amount: Decimal) -> str:
        return f"Invoice #{order_id}: ${amount:.2f}"


class DomesticKit:
    region = "domestic"

    def payment_processor(self) -> PaymentProcessor:
        return CardPayment()

    def shipping_calculator(self) -> ShippingCalculator:
        return FlatRateShipping()

    def invoice_formatter(self) -> InvoiceFormatter:
        return PlainInvoice()


# --- International family ---------------------------------------------------

class WireTransferPayment:
    def __init__(self, currency: str = "EUR"):
        self.currency = currency

    def charge(self, amount: Decimal) -> str:
        return f"Wired {amount:.2f} {self.currency}"


class WeightBasedShipping:
    def __init__(self, base: Decimal = Decimal("15.00"), per_kg: Decimal = Decimal("4.50")):
        self.base = base
        self.per_kg = per_kg

    def cost(self, weight_kg: Decimal) -> Decimal:
        if weight_kg < 0:
            raise ValueError("weight cannot be negative")
        return (self.base + self.per_kg * weight_kg).quantize(CENT, rounding=ROUND_HALF_UP)


class VatInvoice:
    def __init__(self, vat_rate: Decimal = Decimal("0.20"), currency: str = "EUR"):
        self.vat_rate = vat_rate
        self.currency = currency

    def format(self, order_id: int, amount: Decimal) -> str:
        vat = (amount * self.vat_rate).quantize(CENT, rounding=ROUND_HALF_UP)
        return (
            f"Invoice #{order_id}: {amount:.2f} {self.currency} "
            f"+ VAT {vat:.2f} = {amount + vat:.2f} {self.currency}"
        )


class InternationalKit:
    region = "international"

    def __init__(self, currency: str = "EUR"):
        self.currency = currency

    def payment_processor(self) -> PaymentProcessor:
        return WireTransferPayment(self.currency)

    def shipping_calculator(self) -> ShippingCalculator:
        return WeightBasedShipping()

    def invoice_formatter(self) -> InvoiceFormatter:
        return VatInvoice(currency=self.currency)


storefront_kits: FactoryRegistry[StorefrontKit] = FactoryRegistry("storefront kit")
storefront_kits.register("domestic", DomesticKit)
storefront_kits.register("international", InternationalKit)


def get_storefront_kit(region: str | None = None) -> StorefrontKit:
    """Return the kit for ``region`` (defaults to the configured region)."""
    return storefront_kits.create(region or settings.storefront_region)


def checkout(kit: StorefrontKit, order_id: int, amount: Decimal, weight_kg: Decimal) -> list[str]:
    """Run one checkout using only parts from ``kit``."""
    shipping = kit.shipping_calculator().cost(weight_kg)
    total = amount + shipping
    return [
        kit.payment_processor().charge(total),
        kit.invoice_formatter().format(order_id, total),
    ]


def demo() -> None:
    print(f"-- configured region: {settings.storefront_region}")
    for line in checkout(get_storefront_kit(), 4001, Decimal("40.00"), Decimal("2")):
        print(line)

    print("-- every registered family, same checkout code")
    for region in storefront_kits.kinds():
        kit = get_storefront_kit(region)
        for line in checkout(kit, 4002, Decimal("40.00"), Decimal("2")):
            print(f"[{kit.region}] {line}")
