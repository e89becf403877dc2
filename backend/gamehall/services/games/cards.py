"""Card tokens, deck construction and meld search for gin rummy.

A card is the string ``"<rank><suit>"`` (``"10♥"``, ``"Q♣"``). Rank values
run A=1 .. K=13 and are only used for run adjacency.
"""

import random
import re
from collections import defaultdict, namedtuple
from itertools import combinations
from typing import Dict, List, Optional, Sequence, Tuple

from gamehall.errors import InvalidCardToken

SUITS = ("♠", "♥", "♦", "♣")
RANKS = ("A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K")
RANK_VALUES = {rank: value for value, rank in enumerate(RANKS, start=1)}
DECK_SIZE = len(SUITS) * len(RANKS)

# The gin search below is brute force over every 4-meld and pair of 3-melds.
# That is only reasonable because a hand is exactly this size.
GIN_HAND_SIZE = 10

_CARD_RE = re.compile(r"^(A|2|3|4|5|6|7|8|9|10|J|Q|K)([♠♥♦♣])$")

Card = namedtuple("Card", ["rank", "suit", "value"])
Meld = Tuple[int, ...]


def build_deck(rng: Optional[random.Random] = None) -> List[str]:
    """Return all 52 cards in a uniformly random order."""
    deck = [f"{rank}{suit}" for suit in SUITS for rank in RANKS]
    (rng or random).shuffle(deck)
    return deck


def parse_card(token) -> Card:
    match = _CARD_RE.match(token) if isinstance(token, str) else None
    if not match:
        raise InvalidCardToken(token)
    rank, suit = match.groups()
    return Card(rank, suit, RANK_VALUES[rank])


def _parsed(hand: Sequence[str]):
    for index, token in enumerate(hand):
        try:
            yield index, parse_card(token)
        except InvalidCardToken:
            continue


def enumerate_set_melds(hand: Sequence[str]) -> List[Meld]:
    """Index tuples of every same-rank group of three or four cards."""
    by_rank: Dict[str, List[int]] = defaultdict(list)
    for index, card in _parsed(hand):
        by_rank[card.rank].append(index)

    melds: List[Meld] = []
    for indices in by_rank.values():
        if len(indices) < 3:
            continue
        melds.extend(combinations(indices, 3))
        if len(indices) == 4:
            melds.append(tuple(indices))
    return melds


def enumerate_run_melds(hand: Sequence[str]) -> List[Meld]:
    """Index tuples of every same-suit run of exactly three or four cards.

    Longer runs are covered by overlapping windows: a five card run yields
    three 3-runs and two 4-runs.
    """
    by_suit: Dict[str, List[Tuple[int, int]]] = defaultdict(list)
    for index, card in _parsed(hand):
        by_suit[card.suit].append((card.value, index))

    melds: List[Meld] = []
    for cards in by_suit.values():
        cards.sort()
        for length in (3, 4):
            for start in range(len(cards) - length + 1):
                window = cards[start:start + length]
                values = [value for value, _ in window]
                if values == list(range(values[0], values[0] + length)):
                    melds.append(tuple(index for _, index in window))
    return melds


def is_gin(hand: Sequence[str]) -> bool:
    """True when the hand splits exactly into one 4-meld and two 3-melds."""
    if len(hand) != GIN_HAND_SIZE:
        return False

    melds = enumerate_set_melds(hand) + enumerate_run_melds(hand)
    fours = [set(m) for m in melds if len(m) == 4]
    threes = [set(m) for m in melds if len(m) == 3]

    for four in fours:
        for i, first in enumerate(threes):
            if four & first:
                continue
            for second in threes[i + 1:]:
                if four & second or first & second:
                    continue
                if len(four | first | second) == GIN_HAND_SIZE:
                    return True
    return False
