import pytest

from courtside.exceptions import InvalidPayload, UnknownReferee
from courtside.models import Court, Player
from courtside.services.courts.decision import DECISION_THRESHOLD, recompute, tally
from courtside.services.courts.ledger import append_vote, latest_votes

CHONG, HONG = Player.CHONG, Player.HONG


def make_court(referees=('r1', 'r2', 'r3')):
    return Court('C1', 'not-a-real-hash', list(referees))


def vote(court, referee, player, points=1):
    append_vote(court, referee, player, points)
    return recompute(court)


def test_threshold_is_two():
    assert DECISION_THRESHOLD == 2


def test_new_court_is_zeroed():
    court = make_court()
    assert court.round == 1
    assert court.total_score == {'chong': 0, 'hong': 0}
    assert court.round_wins == {'chong': 0, 'hong': 0}
    assert court.scores == {'r1': [], 'r2': [], 'r3': []}
    assert court.snapshot()['lastDecision'] is None


def test_two_agreeing_referees_decide():
    court = make_court()
    assert vote(court, 'r1', 'chong', 2) is None
    assert vote(court, 'r2', 'chong', 3) is CHONG
    assert court.total_score == {'chong': 1, 'hong': 0}


def test_majority_over_dissent():
    court = make_court()
    vote(court, 'r3', 'hong')
    vote(court, 'r1', 'chong')
    assert vote(court, 'r2', 'chong') is CHONG
    assert court.total_score == {'chong': 1, 'hong': 0}


def test_split_vote_with_silent_referee_decides_nothing():
    court = make_court()
    vote(court, 'r1', 'chong')
    assert vote(court, 'r2', 'hong') is None
    assert court.total_score == {'chong': 0, 'hong': 0}
    assert court.consumed_decision is None


def test_only_latest_vote_counts():
    court = make_court()
    # r1 clicked chong twice before switching; the old clicks must not count
    vote(court, 'r1', 'chong')
    vote(court, 'r1', 'chong')
    vote(court, 'r1', 'hong')
    assert vote(court, 'r2', 'chong') is None
    assert tally(court) == {CHONG: 1, HONG: 1}
    assert len(court.scores['r1']) == 3


def test_standing_majority_counts_once():
    court = make_court()
    vote(court, 'r1', 'chong')
    assert vote(court, 'r2', 'chong') is CHONG
    assert vote(court, 'r3', 'chong') is None
    assert vote(court, 'r1', 'chong') is None
    assert vote(court, 'r3', 'hong') is None
    assert court.total_score == {'chong': 1, 'hong': 0}


def test_majority_recounts_after_dissolving():
    court = make_court()
    vote(court, 'r1', 'chong')
    vote(court, 'r2', 'chong')
    # r2 flips away: no majority left, decision re-arms
    assert vote(court, 'r2', 'hong') is None
    assert court.consumed_decision is None
    assert vote(court, 'r2', 'chong') is CHONG
    assert court.total_score == {'chong': 2, 'hong': 0}


def test_majority_moving_to_other_player_counts():
    court = make_court()
    vote(court, 'r1', 'chong')
    vote(court, 'r2', 'chong')
    vote(court, 'r3', 'hong')
    assert vote(court, 'r1', 'hong') is HONG
    assert court.total_score == {'chong': 1, 'hong': 1}


def test_double_threshold_is_refused():
    court = make_court(['r1', 'r2', 'r3', 'r4'])
    vote(court, 'r1', 'chong')
    vote(court, 'r2', 'hong')
    vote(court, 'r3', 'hong')
    assert court.total_score == {'chong': 0, 'hong': 1}
    assert vote(court, 'r4', 'chong') is None
    assert court.total_score == {'chong': 0, 'hong': 1}
    assert court.consumed_decision is HONG


def test_threshold_does_not_depend_on_panel_size():
    court = make_court(['r1', 'r2', 'r3', 'r4', 'r5'])
    vote(court, 'r4', 'hong')
    assert vote(court, 'r5', 'hong') is HONG


def test_latest_votes_skips_referees_who_never_voted():
    court = make_court()
    append_vote(court, 'r2', 'hong', 1)
    assert list(latest_votes(court)) == ['r2']


def test_unknown_referee_leaves_ledger_untouched():
    court = make_court()
    with pytest.raises(UnknownReferee):
        append_vote(court, 'r9', 'chong', 1)
    assert all(events == [] for events in court.scores.values())


@pytest.mark.parametrize('player, points', [
    ('green', 1),
    (None, 1),
    ('chong', '2'),
    ('chong', True),
    ('hong', 1.5),
])
def test_invalid_vote_is_rejected(player, points):
    court = make_court()
    with pytest.raises(InvalidPayload):
        append_vote(court, 'r1', player, points)
    assert court.scores['r1'] == []


def test_player_values_are_case_insensitive():
    assert Player.parse('CHONG') is CHONG
    assert Player.parse(' hong ') is HONG
