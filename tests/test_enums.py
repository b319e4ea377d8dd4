"""Tests for wire enum tags."""

import pytest

from vega_wallet.enums import OrderType, PeggedReference, Side, TimeInForce, VoteValue
from vega_wallet.errors import DecodeError


WIRE_TAGS = [
    (Side.UNSPECIFIED, "SIDE_UNSPECIFIED"),
    (Side.BUY, "SIDE_BUY"),
    (Side.SELL, "SIDE_SELL"),
    (OrderType.UNSPECIFIED, "TYPE_UNSPECIFIED"),
    (OrderType.LIMIT, "TYPE_LIMIT"),
    (OrderType.MARKET, "TYPE_MARKET"),
    (OrderType.NETWORK, "TYPE_NETWORK"),
    (TimeInForce.UNSPECIFIED, "TIME_IN_FORCE_UNSPECIFIED"),
    (TimeInForce.GTC, "TIME_IN_FORCE_GTC"),
    (TimeInForce.GTT, "TIME_IN_FORCE_GTT"),
    (TimeInForce.IOC, "TIME_IN_FORCE_IOC"),
    (TimeInForce.FOK, "TIME_IN_FORCE_FOK"),
    (TimeInForce.GFA, "TIME_IN_FORCE_GFA"),
    (TimeInForce.GFN, "TIME_IN_FORCE_GFN"),
    (PeggedReference.UNSPECIFIED, "PEGGED_REFERENCE_UNSPECIFIED"),
    (PeggedReference.MID, "PEGGED_REFERENCE_MID"),
    (PeggedReference.BEST_BID, "PEGGED_REFERENCE_BEST_BID"),
    (PeggedReference.BEST_ASK, "PEGGED_REFERENCE_BEST_ASK"),
    (VoteValue.UNSPECIFIED, "VALUE_UNSPECIFIED"),
    (VoteValue.NO, "VALUE_NO"),
    (VoteValue.YES, "VALUE_YES"),
]


class TestWireTags:
    """Every member maps to exactly one documented tag."""

    @pytest.mark.parametrize("member,tag", WIRE_TAGS)
    def test_encode(self, member, tag):
        assert member.to_wire() == tag

    @pytest.mark.parametrize("member,tag", WIRE_TAGS)
    def test_decode(self, member, tag):
        assert type(member).from_wire(tag) is member

    def test_every_member_is_documented(self):
        documented = {member for member, _ in WIRE_TAGS}
        for enum_cls in (Side, OrderType, TimeInForce, PeggedReference, VoteValue):
            assert set(enum_cls) <= documented

    @pytest.mark.parametrize(
        "enum_cls,tag",
        [
            (Side, "SIDE_LONG"),
            (Side, "side_buy"),
            (Side, ""),
            (TimeInForce, "TIME_IN_FORCE_GTD"),
            (OrderType, "LIMIT"),
            (PeggedReference, "PEGGED_REFERENCE_LAST"),
            (VoteValue, "VALUE_ABSTAIN"),
            (VoteValue, None),
            (Side, 1),
        ],
    )
    def test_unknown_tag_fails(self, enum_cls, tag):
        with pytest.raises(DecodeError, match="Unknown"):
            enum_cls.from_wire(tag)

    def test_tag_of_other_enum_fails(self):
        with pytest.raises(DecodeError):
            Side.from_wire("VALUE_YES")


class TestNumbers:
    """Protobuf numbers follow declaration order."""

    def test_numbers(self):
        assert Side.UNSPECIFIED.number == 0
        assert Side.SELL.number == 2
        assert TimeInForce.GFN.number == 6
        assert PeggedReference.BEST_ASK.number == 3

    def test_from_number(self):
        assert PeggedReference.from_number(2) is PeggedReference.BEST_BID
        assert VoteValue.from_number(0) is VoteValue.UNSPECIFIED

    @pytest.mark.parametrize("number", [-1, 4, 99])
    def test_from_number_out_of_range(self, number):
        with pytest.raises(DecodeError, match="Unknown PeggedReference number"):
            PeggedReference.from_number(number)

    @pytest.mark.parametrize("number", ["1", 1.0, True, None])
    def test_from_number_rejects_non_integers(self, number):
        with pytest.raises(DecodeError, match="must be an integer"):
            PeggedReference.from_number(number)
