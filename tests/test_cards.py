import pytest

from tricard.cards import Card, RANKS, SUITS, Rank, build_deck, deal, parse_label
from tricard.errors import InvalidRankToken, InvalidSuitToken, MalformedRecord


def test_rank_order_runs_two_through_ace():
    ordered = sorted(Rank)
    assert ordered[0] is Rank.TWO
    assert ordered[-1] is Rank.ACE
    assert Rank.KING < Rank.ACE
    assert "".join(rank.symbol for rank in reversed(ordered)) == RANKS


@pytest.mark.parametrize(
    "char, expected",
    [("2", Rank.TWO), ("9", Rank.NINE), ("T", Rank.TEN), ("J", Rank.JACK), ("Q", Rank.QUEEN), ("K", Rank.KING), ("A", Rank.ACE)],
)
def test_rank_from_char_accepts_canonical_characters(char, expected):
    assert Rank.from_char(char) is expected


@pytest.mark.parametrize("char", ["1", "0", "t", "X", "", "10"])
def test_rank_from_char_rejects_unknown_characters(char):
    with pytest.raises(InvalidRankToken, match="Invalid rank"):
        Rank.from_char(char)


def test_card_validation_rejects_invalid_values():
    with pytest.raises(InvalidRankToken, match="Invalid rank"):
        Card("A", "S")  # type: ignore[arg-type]
    with pytest.raises(InvalidSuitToken, match="Invalid suit"):
        Card(Rank.ACE, "X")


def test_parse_label_builds_card_and_normalises_suit():
    assert parse_label("TD") == Card(Rank.TEN, "D")
    assert parse_label("As") == Card(Rank.ACE, "S")
    assert parse_label("Kh").label == "KH"


def test_parse_label_rank_characters_are_case_sensitive():
    with pytest.raises(InvalidRankToken, match="Invalid rank"):
        parse_label("as")
    with pytest.raises(InvalidRankToken, match="Invalid rank"):
        parse_label("tD")


def test_parse_label_errors_are_value_errors_with_codes():
    with pytest.raises(InvalidRankToken) as rank_err:
        parse_label("1S")
    assert rank_err.value.code == "INVALID_RANK"

    with pytest.raises(InvalidSuitToken) as suit_err:
        parse_label("AX")
    assert suit_err.value.code == "INVALID_SUIT"

    for label in ["A", "ASK", ""]:
        with pytest.raises(MalformedRecord, match="Invalid card label"):
            parse_label(label)

    with pytest.raises(ValueError):
        parse_label("ZZ")


def test_build_deck_is_complete_and_seeded():
    deck = build_deck(seed=11)
    assert len(deck) == 52
    assert len(set(deck)) == 52
    assert {card.suit for card in deck} == set(SUITS)
    assert build_deck(seed=11) == deck


def test_deal_raises_when_deck_exhausted():
    deck = [Card(Rank.ACE, "H"), Card(Rank.KING, "D")]
    dealt = deal(deck, 2)
    assert [card.label for card in dealt] == ["AH", "KD"]
    with pytest.raises(ValueError, match="Not enough cards"):
        deal(deck, 1)
