import random

import pytest

from gamehall.errors import InvalidCardToken
from gamehall.services.games.cards import (
    RANKS, SUITS, build_deck, enumerate_run_melds, enumerate_set_melds, is_gin, parse_card,
)


@pytest.mark.parametrize('seed', [0, 1, 7, 42, 2024])
def test_build_deck_has_every_card_once(seed):
    deck = build_deck(random.Random(seed))
    assert len(deck) == 52
    assert set(deck) == {f"{rank}{suit}" for rank in RANKS for suit in SUITS}


def test_build_deck_is_shuffled():
    decks = {tuple(build_deck(random.Random(seed))) for seed in range(5)}
    assert len(decks) > 1


def test_parse_card():
    card = parse_card('10♥')
    assert (card.rank, card.suit, card.value) == ('10', '♥', 10)
    assert parse_card('A♠').value == 1
    assert parse_card('K♣').value == 13


@pytest.mark.parametrize('token', ['1♠', '11♥', 'A', 'AX', '10', '', 'a♠', None, 10])
def test_parse_card_rejects_bad_tokens(token):
    with pytest.raises(InvalidCardToken):
        parse_card(token)


def test_set_melds():
    hand = ['8♣', '2♠', '8♦', '8♥']
    assert enumerate_set_melds(hand) == [(0, 2, 3)]

    four = ['K♠', 'K♥', 'K♦', 'K♣', '2♠']
    melds = enumerate_set_melds(four)
    assert len([m for m in melds if len(m) == 3]) == 4
    assert (0, 1, 2, 3) in melds


def test_run_melds_slide_over_long_runs():
    hand = ['3♠', 'A♠', '5♠', '2♠', '4♠', '9♥']
    melds = enumerate_run_melds(hand)
    assert sorted(m for m in melds if len(m) == 3) == sorted([(1, 3, 0), (3, 0, 4), (0, 4, 2)])
    assert sorted(m for m in melds if len(m) == 4) == sorted([(1, 3, 0, 4), (3, 0, 4, 2)])


def test_run_melds_need_same_suit_and_adjacent_values():
    assert enumerate_run_melds(['A♠', '2♥', '3♠']) == []
    assert enumerate_run_melds(['Q♦', 'K♦', 'A♦']) == []


def test_melds_skip_unparseable_tokens():
    assert enumerate_set_melds(['8♣', '8♦', '8?', '8♥']) == [(0, 1, 3)]


def test_is_gin_positive():
    hand = ['A♠', '2♠', '3♠', '4♠', '5♥', '6♥', '7♥', '8♣', '8♦', '8♥']
    assert is_gin(hand)


def test_is_gin_negative():
    hand = ['A♠', '3♠', '5♠', '7♠', '9♠', '2♥', '4♥', '6♥', '8♥', '10♥']
    assert not is_gin(hand)


def test_is_gin_uses_a_three_card_subset_of_a_set():
    hand = ['7♠', '7♥', '7♦', '7♣', '8♣', '9♣', '10♣', '2♦', '3♦', '4♦']
    assert is_gin(hand)


def test_is_gin_with_four_of_a_kind():
    hand = ['K♠', 'K♥', 'K♦', 'K♣', 'A♠', '2♠', '3♠', '5♥', '6♥', '7♥']
    assert is_gin(hand)


def test_is_gin_needs_exact_cover():
    # 4 + 3 melds plus a pair and a stray card
    hand = ['A♠', '2♠', '3♠', '4♠', '5♥', '6♥', '7♥', '8♣', '8♦', 'K♠']
    assert not is_gin(hand)


def test_is_gin_needs_ten_cards():
    hand = ['A♠', '2♠', '3♠', '4♠', '5♥', '6♥', '7♥', '8♣', '8♦', '8♥']
    assert not is_gin(hand[:9])
    assert not is_gin(hand + ['K♠'])
