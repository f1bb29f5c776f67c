"""
Tests for flush_sim/engine/cards.py
"""

import pytest

from flush_sim.engine.cards import (
    DECK_SIZE,
    InvalidCardError,
    Suit,
    card_to_str,
    cards_to_strings,
    make_card,
    parse_card,
    parse_cards,
    rank_of,
    suit_of,
    validate_cards,
    validate_disjoint,
)


class TestEncoding:
    @pytest.mark.parametrize("card,text", [
        (0, "2d"),
        (12, "Ad"),
        (24, "Kc"),
        (34, "Th"),
        (51, "As"),
    ])
    def test_card_to_str(self, card, text):
        assert card_to_str(card) == text

    def test_one_of_each_suit(self):
        assert cards_to_strings([0, 13, 26, 39]) == ["2d", "2c", "2h", "2s"]

    def test_rank_and_suit(self):
        assert rank_of(24) == 11
        assert suit_of(24) == Suit.CLUBS.value
        assert rank_of(39) == 0
        assert suit_of(39) == Suit.SPADES.value

    def test_make_card(self):
        assert make_card(12, Suit.SPADES) == 51
        assert make_card(0, Suit.HEARTS) == 26
        with pytest.raises(InvalidCardError):
            make_card(13, Suit.DIAMONDS)

    def test_card_to_str_rejects_out_of_range(self):
        with pytest.raises(InvalidCardError):
            card_to_str(52)


class TestParsing:
    def test_parse_card(self):
        assert parse_card("As") == 51
        assert parse_card("AS") == 51
        assert parse_card("td") == 8
        assert parse_card("10h") == 34

    def test_parse_cards_mixed_separators(self):
        assert parse_cards("2d, 3c  4h\n5s") == [0, 14, 28, 42]

    def test_parse_every_card(self):
        assert [parse_card(card_to_str(c)) for c in range(DECK_SIZE)] == list(range(DECK_SIZE))

    @pytest.mark.parametrize("text", ["", "A", "1s", "Ax", "Zz", "11d"])
    def test_parse_rejects_garbage(self, text):
        with pytest.raises(InvalidCardError):
            parse_card(text)


class TestValidation:
    def test_valid_set_returned_as_tuple(self):
        assert validate_cards([3, 1, 2], size=3) == (3, 1, 2)

    @pytest.mark.parametrize("cards", [[52], [-1], ["3"], [True], [1.0]])
    def test_rejects_bad_ids(self, cards):
        with pytest.raises(InvalidCardError):
            validate_cards(cards)

    def test_rejects_wrong_size(self):
        with pytest.raises(InvalidCardError):
            validate_cards([0, 1, 2], size=7)

    def test_rejects_duplicates(self):
        with pytest.raises(InvalidCardError):
            validate_cards([5, 6, 5])

    def test_disjoint(self):
        validate_disjoint([0, 1], [2, 3], [4])
        with pytest.raises(InvalidCardError, match="3c"):
            validate_disjoint([0, 14], [14, 3])

    def test_error_is_value_error(self):
        assert issubclass(InvalidCardError, ValueError)
