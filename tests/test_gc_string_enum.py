import logging

import pytest

from gocardless_client.errors import InvalidEnumValue
from gocardless_client.models import (
    ApiErrorType,
    BalanceBalanceType,
    BalanceCurrency,
    CreditorBankAccountAccountType,
    CreditorBankAccountVerificationStatus,
    PayoutCurrency,
    PayoutFxFxCurrency,
    PayoutPayoutType,
    PayoutStatus,
)

ALL_ENUMS = [
    ApiErrorType,
    BalanceBalanceType,
    BalanceCurrency,
    CreditorBankAccountAccountType,
    CreditorBankAccountVerificationStatus,
    PayoutCurrency,
    PayoutFxFxCurrency,
    PayoutPayoutType,
    PayoutStatus,
]


def test_known_currency_decodes():
    assert PayoutCurrency.from_wire("GBP") is PayoutCurrency.GBP


def test_unknown_currency_decodes_to_sentinel(caplog):
    """Test that a currency added to the API later does not break decoding"""
    with caplog.at_level(logging.DEBUG, logger="gocardless_client.models.gc_string_enum"):
        decoded = PayoutCurrency.from_wire("XYZ_NEW_CURRENCY")

    assert decoded is PayoutCurrency.UNKNOWN
    assert "XYZ_NEW_CURRENCY" in caplog.text


def test_decoding_is_case_sensitive():
    assert BalanceCurrency.from_wire("gbp") is BalanceCurrency.UNKNOWN


def test_literal_unknown_decodes_to_sentinel():
    assert PayoutStatus.from_wire("unknown") is PayoutStatus.UNKNOWN


@pytest.mark.parametrize("enum_cls", ALL_ENUMS, ids=lambda cls: cls.__name__)
def test_every_wire_value_round_trips(enum_cls):
    """Test decode then encode for each documented value of each enum"""
    assert enum_cls.wire_table()
    for wire, member in enum_cls.wire_table().items():
        assert enum_cls.from_wire(wire) is member
        assert enum_cls.to_wire(enum_cls.from_wire(wire)) == wire


@pytest.mark.parametrize("enum_cls", ALL_ENUMS, ids=lambda cls: cls.__name__)
def test_sentinel_cannot_be_encoded(enum_cls):
    assert enum_cls.sentinel() is enum_cls.UNKNOWN
    assert "unknown" not in enum_cls.wire_table()
    with pytest.raises(InvalidEnumValue):
        enum_cls.to_wire(enum_cls.UNKNOWN)


def test_values_outside_the_enum_cannot_be_encoded():
    with pytest.raises(InvalidEnumValue):
        PayoutCurrency.to_wire("GBP")
    with pytest.raises(InvalidEnumValue):
        PayoutCurrency.to_wire(BalanceCurrency.GBP)
    with pytest.raises(ValueError):
        PayoutCurrency.to_wire(None)


def test_wire_table_is_read_only():
    table = PayoutStatus.wire_table()
    with pytest.raises(TypeError):
        table["returned"] = PayoutStatus.UNKNOWN
    assert dict(table) == {
        "pending": PayoutStatus.PENDING,
        "paid": PayoutStatus.PAID,
        "bounced": PayoutStatus.BOUNCED,
    }


def test_members_behave_as_strings():
    assert str(PayoutPayoutType.PARTNER) == "partner"
    assert PayoutPayoutType.PARTNER == "partner"


@pytest.mark.parametrize("data", [["GBP"], {"currency": "GBP"}, 826, None], ids=["list", "dict", "int", "none"])
def test_non_string_values_decode_to_sentinel(data, caplog):
    with caplog.at_level(logging.DEBUG, logger="gocardless_client.models.gc_string_enum"):
        decoded = PayoutCurrency.from_wire(data)

    assert decoded is PayoutCurrency.UNKNOWN
    assert "Unrecognised PayoutCurrency" in caplog.text
