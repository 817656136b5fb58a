from crib_logic import Category, ScoreEvent, fifteens, flush, nob, pairs, runs


def test_fifteens_are_emitted_include_branch_first(cards):
    events = fifteens(cards("5H JS QD 2C 3S"))
    assert [event.cards for event in events] == [
        tuple(cards("5H JS")),
        tuple(cards("5H QD")),
        tuple(cards("JS 2C 3S")),
        tuple(cards("QD 2C 3S")),
    ]
    assert all(event.category == Category.FIFTEEN and event.points == 2 for event in events)


def test_fifteens_count_every_distinct_subset(cards):
    # Four fives against a jack: 4 x (5 + J) plus 4 x (5 + 5 + 5).
    events = fifteens(cards("5H 5C 5D JS 5S"))
    assert len(events) == 8
    assert events[0].cards == tuple(cards("5H 5C 5D"))


def test_fifteens_none(cards):
    assert fifteens(cards("2S 4S 6S 8H 10D")) == []


def test_single_face_card_is_never_fifteen(cards):
    assert fifteens(cards("KS QH JD 10C AS")) == []


def test_pairs_group_whole_rank(cards):
    events = pairs(cards("2S 2H 2D 8H 10D"))
    assert events == [ScoreEvent(Category.PAIR, tuple(cards("2S 2H 2D")))]
    assert events[0].points == 6


def test_pairs_points_by_group_size(cards):
    assert pairs(cards("2S 2H 6S 8H 10D"))[0].points == 2
    assert pairs(cards("2S 2H 6D 2C 2D"))[0].points == 12


def test_pairs_sorted_by_rank_then_suit(cards):
    events = pairs(cards("10H 2C 2S 6S 10D"))
    assert [event.cards for event in events] == [
        tuple(cards("2S 2C")),
        tuple(cards("10H 10D")),
    ]


def test_pairs_handle_two_repeated_ranks_in_one_set(cards):
    # Not dealable from one deck, but still counted per rank.
    events = pairs(cards("3S 3S 9H 9H 9H"))
    assert [len(event.cards) for event in events] == [2, 3]
    assert sum(event.points for event in events) == 8


def test_single_cards_never_pair(cards):
    assert pairs(cards("AS 3H 5D 7C 9S")) == []


def test_runs_keep_only_longest(cards):
    events = runs(cards("10H JC QD KS 9S"))
    assert len(events) == 1
    assert events[0].cards == tuple(cards("9S 10H JC QD KS"))
    assert events[0].points == 5


def test_double_run_splits_on_repeated_rank(cards):
    events = runs(cards("3H 4S 4D 5C 9S"))
    assert [event.cards for event in events] == [
        tuple(cards("3H 4D 5C")),
        tuple(cards("3H 4S 5C")),
    ]
    assert all(event.points == 3 for event in events)


def test_double_double_run(cards):
    events = runs(cards("3H 3S 4D 5C 5S"))
    assert len(events) == 4
    assert sum(event.points for event in events) == 12


def test_runs_ignore_gaps_and_short_sequences(cards):
    assert runs(cards("AH 2C 4D 5S 7S")) == []
    assert runs(cards("2S 4S 6S 8H 10D")) == []


def test_ace_is_low_only(cards):
    assert runs(cards("QH KC AD 2S 6S")) == []


def test_four_card_flush(cards, card):
    hand = cards("2S 4S 6S 8S")
    event = flush(hand, card("10D"))
    assert event == ScoreEvent(Category.FLUSH, tuple(hand))
    assert event.points == 4


def test_five_card_flush(cards, card):
    event = flush(cards("2S 4S 6S 8S"), card("10S"))
    assert event.points == 5
    assert event.cards[-1] == card("10S")


def test_starter_cannot_create_flush(cards, card):
    assert flush(cards("2S 4S 6S 8C"), card("10S")) is None


def test_crib_flush_needs_all_five(cards, card):
    assert flush(cards("2S 4S 6S 8S"), card("10D"), crib=True) is None
    assert flush(cards("2S 4S 6S 8S"), card("10S"), crib=True).points == 5


def test_nob(cards, card):
    event = nob(cards("2H 4S 6S JS"), card("10S"))
    assert event == ScoreEvent(Category.NOB, (card("JS"),))
    assert event.points == 1


def test_jack_of_another_suit_is_not_nob(cards, card):
    assert nob(cards("2H 4S 6S JH"), card("10S")) is None


def test_starter_jack_is_not_nob(cards, card):
    assert nob(cards("2H 4S 6S 10S"), card("JS")) is None
