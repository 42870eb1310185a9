import pytest

from voting.models import Vote, Voter
from voting.services import (
    InvalidVoteError,
    NomineeMismatchError,
    NomineeNotFoundError,
    VotingClosedError,
    cast_vote,
    list_votes_for_user,
    retract_vote,
)
from voting.settings_store import InMemorySettingsStore

OPEN = InMemorySettingsStore({'voting_open': True})
CLOSED = InMemorySettingsStore({'voting_open': False})


@pytest.mark.django_db
class TestCastVote:
    def test_first_vote_creates_user_and_vote(self, catalog):
        film, alpha = catalog['film'], catalog['film_first']

        cast_vote('u1', film.id, alpha.id, settings_store=OPEN)

        assert Voter.objects.filter(pk='u1').exists()
        vote = Vote.objects.get(user_id='u1', nomination=film)
        assert vote.nominee_id == alpha.id

    def test_second_vote_replaces_first(self, catalog):
        film = catalog['film']

        cast_vote('u1', film.id, catalog['film_first'].id, settings_store=OPEN)
        cast_vote('u1', film.id, catalog['film_second'].id, settings_store=OPEN)

        votes = Vote.objects.filter(user_id='u1', nomination=film)
        assert votes.count() == 1
        assert votes.get().nominee_id == catalog['film_second'].id

    def test_votes_in_different_nominations_are_independent(self, catalog):
        cast_vote('u1', catalog['film'].id, catalog['film_first'].id, settings_store=OPEN)
        cast_vote('u1', catalog['actor'].id, catalog['actor_only'].id, settings_store=OPEN)

        assert Vote.objects.filter(user_id='u1').count() == 2
        assert Voter.objects.filter(pk='u1').count() == 1

    def test_closed_voting_rejected(self, catalog):
        with pytest.raises(VotingClosedError):
            cast_vote('u1', catalog['film'].id, catalog['film_first'].id, settings_store=CLOSED)
        assert not Vote.objects.exists()

    def test_closed_voting_checked_before_nominee(self):
        # No database access needed: the flag is checked first
        with pytest.raises(VotingClosedError):
            cast_vote('u1', 1, 999, settings_store=CLOSED)

    def test_unknown_nominee(self, catalog):
        with pytest.raises(NomineeNotFoundError):
            cast_vote('u1', catalog['film'].id, 999999, settings_store=OPEN)

    def test_nominee_from_other_nomination(self, catalog):
        with pytest.raises(NomineeMismatchError):
            cast_vote('u1', catalog['film'].id, catalog['actor_only'].id, settings_store=OPEN)

        assert not Vote.objects.exists()
        assert not Voter.objects.exists()

    @pytest.mark.parametrize('user_id, nomination_id, nominee_id', [
        ('', 1, 1),
        (None, 1, 1),
        ('u1', None, 1),
        ('u1', 1, None),
        ('u1', 0, 1),
    ])
    def test_missing_identifiers(self, user_id, nomination_id, nominee_id):
        with pytest.raises(InvalidVoteError):
            cast_vote(user_id, nomination_id, nominee_id, settings_store=OPEN)


@pytest.mark.django_db
class TestRetractVote:
    def test_retract_existing_vote(self, catalog):
        cast_vote('u1', catalog['film'].id, catalog['film_first'].id, settings_store=OPEN)

        deleted = retract_vote('u1', catalog['film'].id, settings_store=OPEN)

        assert deleted == 1
        assert not Vote.objects.filter(user_id='u1').exists()
        # The user row stays
        assert Voter.objects.filter(pk='u1').exists()

    def test_retract_without_vote_is_noop(self, catalog):
        assert retract_vote('nobody', catalog['film'].id, settings_store=OPEN) == 0

    def test_retract_only_touches_one_nomination(self, catalog):
        cast_vote('u1', catalog['film'].id, catalog['film_first'].id, settings_store=OPEN)
        cast_vote('u1', catalog['actor'].id, catalog['actor_only'].id, settings_store=OPEN)

        retract_vote('u1', catalog['film'].id, settings_store=OPEN)

        assert list_votes_for_user('u1') == {catalog['actor'].id: catalog['actor_only'].id}

    def test_closed_voting_rejected(self, catalog):
        cast_vote('u1', catalog['film'].id, catalog['film_first'].id, settings_store=OPEN)

        with pytest.raises(VotingClosedError):
            retract_vote('u1', catalog['film'].id, settings_store=CLOSED)
        assert Vote.objects.filter(user_id='u1').exists()

    def test_missing_identifiers(self):
        with pytest.raises(InvalidVoteError):
            retract_vote('', 1, settings_store=OPEN)


@pytest.mark.django_db
class TestListVotesForUser:
    def test_unknown_user(self):
        assert list_votes_for_user('ghost') == {}

    def test_maps_nomination_to_nominee(self, catalog):
        cast_vote('u1', catalog['film'].id, catalog['film_second'].id, settings_store=OPEN)
        cast_vote('u2', catalog['film'].id, catalog['film_first'].id, settings_store=OPEN)

        assert list_votes_for_user('u1') == {catalog['film'].id: catalog['film_second'].id}
