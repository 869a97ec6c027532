import pytest

from tricard.errors import (
    DuplicateCard,
    DuplicatePlayer,
    EmptyInput,
    InvalidPlayerCount,
    InvalidRankToken,
    InvalidSuitToken,
    MalformedRecord,
    ShowdownError,
)
from tricard.models import RoundConfig
from tricard.parser import parse_records, parse_round
from tricard.showdown import evaluate_records, evaluate_round, format_error

from .helpers import round_text


@pytest.mark.parametrize("text", ["", "   \n", "zero\n0 AS KH TD", "0\n", "-2\n0 AS KH TD"])
def test_parse_round_rejects_missing_or_non_positive_player_count(text):
    with pytest.raises(InvalidPlayerCount):
        parse_round(text)


def test_parse_round_rejects_unknown_rank_character():
    with pytest.raises(InvalidRankToken, match="Invalid rank"):
        parse_round("1\n0 AS KH 1D\n")


def test_parse_round_rejects_unknown_suit_character():
    with pytest.raises(InvalidSuitToken, match="Invalid suit"):
        parse_round("1\n0 AS KH TZ\n")


def test_parse_round_rejects_short_records():
    with pytest.raises(MalformedRecord, match="Record 2 is incomplete"):
        parse_round("2\n0 AS KH TD\n1 AC KD\n")


def test_parse_round_rejects_tokens_that_are_not_two_characters():
    with pytest.raises(MalformedRecord, match="Invalid card label"):
        parse_round("1\n0 AS KH 10D\n")


def test_parse_round_rejects_non_integer_player_id():
    with pytest.raises(MalformedRecord, match="Player id"):
        parse_round("1\nbob AS KH TD\n")


def test_parse_round_rejects_trailing_tokens():
    with pytest.raises(MalformedRecord, match="trailing"):
        parse_round("1\n0 AS KH TD\n1 AC KD TS\n")


def test_parse_round_rejects_repeated_player_ids():
    with pytest.raises(DuplicatePlayer, match="Player 4"):
        parse_round(round_text([(4, ["AS", "KH", "TD"]), (4, ["AC", "KD", "TS"])]))


def test_duplicate_cards_only_rejected_when_configured():
    text = round_text([(0, ["AS", "KH", "TD"]), (1, ["AS", "QH", "TC"])])
    assert len(parse_round(text)) == 2
    with pytest.raises(DuplicateCard, match="AS"):
        parse_round(text, RoundConfig(distinct_cards=True))


def test_max_players_limit_applies_to_text_and_records():
    text = round_text([(0, ["AS", "KH", "TD"]), (1, ["AC", "KD", "TS"])])
    config = RoundConfig(max_players=1)
    with pytest.raises(InvalidPlayerCount, match="At most 1"):
        parse_round(text, config)
    with pytest.raises(InvalidPlayerCount, match="At most 1"):
        parse_records([(0, ["AS", "KH", "TD"]), (1, ["AC", "KD", "TS"])], config)


def test_parse_records_rejects_wrong_card_count_and_types():
    with pytest.raises(MalformedRecord, match="exactly 3 cards"):
        parse_records([(0, ["AS", "KH"])])
    with pytest.raises(MalformedRecord, match="exactly 3 cards"):
        parse_records([(0, "ASKHTD")])
    with pytest.raises(MalformedRecord, match="exactly 3 cards"):
        parse_records([(0, None)])
    with pytest.raises(MalformedRecord, match="Invalid card label"):
        parse_records([(0, ["AS", "KH", 7])])
    with pytest.raises(MalformedRecord, match="Player id"):
        parse_records([(True, ["AS", "KH", "TD"])])


def test_parse_records_accepts_numeric_string_ids():
    hands = parse_records([("12", ["AS", "KH", "TD"])])
    assert hands[0][0] == 12


def test_all_input_errors_share_a_base_class_and_code():
    for error_type in (
        InvalidRankToken,
        InvalidSuitToken,
        InvalidPlayerCount,
        MalformedRecord,
        DuplicatePlayer,
        DuplicateCard,
        EmptyInput,
    ):
        assert issubclass(error_type, ShowdownError)
        assert issubclass(error_type, ValueError)
    codes = {error_type.code for error_type in ShowdownError.__subclasses__()}
    assert "INVALID_RANK" in codes
    assert "EMPTY_INPUT" in codes


def test_evaluate_round_reports_errors_without_partial_results():
    outcome = evaluate_round("2\n0 AS KH TD\n1 AC KD XS\n")
    assert not outcome.ok
    assert isinstance(outcome.error, InvalidRankToken)
    assert outcome.winners == []
    assert outcome.hands == []
    assert format_error(outcome.error).startswith("INVALID_RANK: ")


def test_evaluate_records_reports_empty_input():
    outcome = evaluate_records([])
    assert isinstance(outcome.error, EmptyInput)
    assert outcome.winners == []
