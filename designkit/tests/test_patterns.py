from __future__ import annotations

from decimal import Decimal

import pytest

from designkit import sink as sink_mod
from designkit.errors import BuildError, UnknownKindError
from designkit.patterns import abstract_factory, builder, factory, singleton


# --- Factory -----------------------------------------------------------------

def test_every_notification_kind_has_a_constructor():
    for kind in factory.NotificationKind:
        assert kind in factory.notifications
    assert len(factory.notifications) == len(factory.NotificationKind)


@pytest.mark.parametrize(
    "kind, cls",
    [
        (factory.NotificationKind.EMAIL, factory.EmailNotification),
        ("sms", factory.SmsNotification),
        ("PUSH", factory.PushNotification),
    ],
)
def test_notification_for_builds_expected_class(kind, cls):
    assert isinstance(factory.notification_for(kind), cls)


def test_notification_for_uses_configured_default(monkeypatch):
    monkeypatch.setattr(factory.settings, "default_notification", "sms")
    assert isinstance(factory.notification_for(), factory.SmsNotification)


def test_notification_for_passes_constructor_arguments(capsys):
    delivery = factory.notification_for("push", app_name="shop").send("grace", "sale")
    assert delivery == factory.Delivery("push", "grace", "[shop] sale")


def test_notification_for_unknown_kind():
    with pytest.raises(UnknownKindError) as exc_info:
        factory.notification_for("pigeon")
    assert "email" in exc_info.value.known


def test_string_switch_factory_fails_at_runtime():
    assert isinstance(factory.create_notification("email"), factory.EmailNotification)
    with pytest.raises(ValueError, match="Unknown notification type: push"):
        factory.create_notification("push")


# --- Abstract factory -----------------------------------------------------------

def test_kit_selected_from_configuration(monkeypatch):
    monkeypatch.setattr(abstract_factory.settings, "storefront_region", "international")
    kit = abstract_factory.get_storefront_kit()
    assert isinstance(kit, abstract_factory.InternationalKit)
    assert kit.region == "international"


def test_kits_share_no_base_class():
    assert abstract_factory.DomesticKit.__mro__[1] is object
    assert abstract_factory.InternationalKit.__mro__[1] is object


def test_domestic_checkout():
    kit = abstract_factory.get_storefront_kit("domestic")
    lines = abstract_factory.checkout(kit, 10, Decimal("40.00"), Decimal("2"))
    assert lines == ["Charged $45.00 to card", "Invoice #10: $45.00"]


def test_international_checkout():
    kit = abstract_factory.get_storefront_kit("international")
    lines = abstract_factory.checkout(kit, 11, Decimal("40.00"), Decimal("2"))
    # 15.00 base + 2 kg * 4.50 = 24.00 shipping
    assert lines[0] == "Wired 64.00 EUR"
    assert lines[1] == "Invoice #11: 64.00 EUR + VAT 12.80 = 76.80 EUR"


def test_weight_based_shipping_rejects_negative_weight():
    with pytest.raises(ValueError):
        abstract_factory.WeightBasedShipping().cost(Decimal("-1"))


def test_unknown_region():
    with pytest.raises(UnknownKindError):
        abstract_factory.get_storefront_kit("lunar")


# --- Singleton -----------------------------------------------------------------

def test_get_logger_returns_shared_sink():
    assert singleton.get_logger() is sink_mod.get_log_sink()


def test_guarded_accessor_under_race():
    seen = singleton.race(singleton.get_logger, callers=32)
    assert len({id(obj) for obj in seen}) == 1


def test_naive_logger_is_a_singleton_without_threads():
    singleton.NaiveLogger.forget()
    try:
        assert singleton.NaiveLogger() is singleton.NaiveLogger()
        assert singleton.NaiveLogger.instances_created == 1
    finally:
        singleton.NaiveLogger.forget()


def test_naive_logger_races_when_construction_is_slow(monkeypatch):
    singleton.NaiveLogger.forget()
    monkeypatch.setattr(singleton.NaiveLogger, "construction_delay", 0.05)
    try:
        seen = singleton.race(singleton.NaiveLogger, callers=8)
        assert singleton.NaiveLogger.instances_created > 1
        assert len({id(obj) for obj in seen}) > 1
    finally:
        singleton.NaiveLogger.forget()


def test_singleton_demo_writes_to_sink(capsys):
    singleton.demo()
    out = capsys.readouterr().out
    assert "8 threads saw 1 distinct instance(s)" in out
    assert "singleton demo finished threads=8" in sink_mod.get_log_sink().path.read_text()


# --- Builder -------------------------------------------------------------------

def test_builder_fluent_chain():
    order = (
        builder.OrderBuilder()
        .for_customer("Heidi", email="heidi@example.com")
        .add_line("PEN-1", 3, "1.20")
        .add_line("PAD-2", 1, Decimal("4.00"))
        .ship_to("1 Main St")
        .with_note("gift wrap")
        .with_note("leave at door")
        .build()
    )
    assert order.customer.name == "Heidi"
    assert order.total_amount == Decimal("7.60")
    assert order.shipping_address == "1 Main St"
    assert order.note == "gift wrap; leave at door"


def test_built_order_is_independent_of_builder():
    b = builder.OrderBuilder().for_customer("Ivan").add_line("A", 1, "2.00")
    first = b.build()
    b.add_line("B", 1, "3.00")
    second = b.build()

    assert len(first.lines) == 1
    assert len(second.lines) == 2
    assert first.order_id != second.order_id
    assert first.customer is not second.customer


@pytest.mark.parametrize(
    "steps, message",
    [
        (lambda b: b.add_line("A", 1, "1"), "customer"),
        (lambda b: b.for_customer("Ivan"), "at least one line"),
        (lambda b: b.for_customer("Ivan").add_line("A", 0, "1"), "positive"),
        (lambda b: b.for_customer("Ivan").add_line("A", 1, "-1"), "negative"),
        (lambda b: b.for_customer("Ivan").add_line("A", 1, "abc"), "not a number"),
        (lambda b: b.for_customer("Ivan").add_line("A", 1, "NaN"), "finite"),
        (lambda b: b.for_customer("Ivan").add_line("A", 1, float("inf")), "finite"),
    ],
)
def test_builder_rejects_incomplete_orders(steps, message):
    with pytest.raises(BuildError, match=message):
        steps(builder.OrderBuilder()).build()


def test_builder_float_prices_keep_their_decimal_value():
    order = builder.OrderBuilder().for_customer("Ivan").add_line("A", 3, 0.1).build()
    assert order.lines[0].unit_price == Decimal("0.1")
    assert order.total_amount == Decimal("0.3")


def test_builder_reset_starts_fresh():
    b = builder.OrderBuilder().for_customer("Ivan").add_line("A", 1, "1")
    b.reset()
    with pytest.raises(BuildError):
        b.build()


@pytest.mark.parametrize("module", [factory, abstract_factory, builder])
def test_pattern_demos_run(module, capsys):
    module.demo()
    assert capsys.readouterr().out
