from __future__ import annotations

import pytest

from paymentsheet.intent import IntentKind, TransactionContractError, TransactionSnapshot, Usage


def test_payment_intent_payload_is_normalized(payment_intent) -> None:
    snapshot = TransactionSnapshot.from_payload(
        payment_intent(
            payment_method_types=["card", " klarna ", "card", ""],
            unactivated_payment_method_types=["klarna"],
            livemode=True,
            setup_future_usage="off_session",
        ),
        has_saved_payment_methods=True,
    )
    assert snapshot.kind is IntentKind.PAYMENT
    assert snapshot.requested_codes == ("card", "klarna")
    assert snapshot.unactivated_codes == frozenset({"klarna"})
    assert snapshot.is_live_mode is True
    assert snapshot.amount == 1099
    assert snapshot.currency == "usd"
    assert snapshot.usage is Usage.OFF_SESSION
    assert snapshot.has_saved_payment_methods is True
    assert snapshot.intent_id == "pi_test_123"


def test_setup_intent_drops_amount_and_defaults_usage(setup_intent) -> None:
    snapshot = TransactionSnapshot.from_payload(setup_intent(amount=500, currency="usd", usage=None))
    assert snapshot.kind is IntentKind.SETUP
    assert snapshot.amount is None
    assert snapshot.currency is None
    assert snapshot.usage is Usage.OFF_SESSION


def test_has_intent_to_setup(payment_intent, setup_intent) -> None:
    assert TransactionSnapshot.from_payload(setup_intent()).has_intent_to_setup() is True
    assert TransactionSnapshot.from_payload(payment_intent()).has_intent_to_setup() is False
    on_session = TransactionSnapshot.from_payload(payment_intent(setup_future_usage="on_session"))
    assert on_session.has_intent_to_setup() is True


def test_payment_method_options_accept_json_string(payment_intent) -> None:
    snapshot = TransactionSnapshot.from_payload(
        payment_intent(payment_method_options='{"us_bank_account":{"verification_method":"instant"}}')
    )
    assert snapshot.options_for("us_bank_account") == {"verification_method": "instant"}
    assert snapshot.options_for("card") == {}


def test_shipping_presence_is_recorded(payment_intent) -> None:
    assert TransactionSnapshot.from_payload(payment_intent()).has_shipping is False
    shipped = TransactionSnapshot.from_payload(payment_intent(shipping={"name": "Jenny Rosen"}))
    assert shipped.has_shipping is True


def test_payment_intent_with_missing_currency_still_parses(payment_intent) -> None:
    snapshot = TransactionSnapshot.from_payload(payment_intent(currency=None))
    assert snapshot.currency is None
    assert snapshot.amount == 1099


@pytest.mark.parametrize(
    "overrides",
    [
        {"object": "charge"},
        {"amount": "500"},
        {"amount": True},
        {"amount": -1},
        {"livemode": "yes"},
        {"payment_method_types": "card"},
        {"setup_future_usage": "sometimes"},
        {"payment_method_options": "{not json"},
        {"payment_method_options": ["card"]},
    ],
)
def test_structurally_invalid_payloads_are_rejected(payment_intent, overrides) -> None:
    with pytest.raises(TransactionContractError):
        TransactionSnapshot.from_payload(payment_intent(**overrides))


def test_direct_construction_enforces_invariants() -> None:
    with pytest.raises(TransactionContractError):
        TransactionSnapshot(kind=IntentKind.PAYMENT, requested_codes=("card", "card"))
    with pytest.raises(TransactionContractError):
        TransactionSnapshot(kind=IntentKind.SETUP, requested_codes=("card",), amount=100)
