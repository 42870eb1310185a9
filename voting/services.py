"""
Voting services - nomination catalog, vote ledger, winner calculation.

Views call into this module; it raises VotingError subclasses for every
expected failure so the HTTP layer only has to map them to status codes.
"""
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from django.db import transaction
from django.db.models import Count

from .models import Nomination, Nominee, Vote, Voter, published_filter
from .settings_store import RESULTS_PUBLISHED, VOTING_OPEN, DEFAULTS, get_settings_store

logger = logging.getLogger(__name__)


class VotingError(Exception):
    status_code = 400


class InvalidVoteError(VotingError):
    pass


class VotingClosedError(VotingError):
    status_code = 403


class NomineeNotFoundError(VotingError):
    pass


class NomineeMismatchError(VotingError):
    pass


class ResultsNotPublishedError(VotingError):
    status_code = 403


# ==============================================================================
# NOMINATION CATALOG
# ==============================================================================

@dataclass
class NomineeEntry:
    id: int
    name: str
    image_url: Optional[str]
    position: int


@dataclass
class NominationEntry:
    id: int
    title: str
    description: str
    position: int
    image_url: Optional[str]
    nominees: List[NomineeEntry] = field(default_factory=list)


CATALOG_COLUMNS = (
    'id',
    'title',
    'description',
    'position',
    'image_url',
    'nominees__id',
    'nominees__name',
    'nominees__image_url',
    'nominees__position',
)


def list_nominations(published_only=True) -> List[NominationEntry]:
    """
    Return nominations with their nominees, both in position order.

    Runs a single LEFT JOIN of nominations to nominees and groups the flat
    rows back into nominations. A nomination with no nominees produces one
    row whose nominee columns are NULL; that row yields an empty list.

    Args:
        published_only (bool): Hide nominations whose flag is False

    Returns:
        list[NominationEntry]
    """
    queryset = Nomination.objects.all()
    if published_only:
        queryset = queryset.filter(published_filter())

    rows = queryset.order_by(
        'position', 'id', 'nominees__position', 'nominees__id'
    ).values(*CATALOG_COLUMNS)

    nominations = {}
    for row in rows:
        entry = nominations.get(row['id'])
        if entry is None:
            entry = NominationEntry(
                id=row['id'],
                title=row['title'],
                description=row['description'],
                position=row['position'],
                image_url=row['image_url'],
            )
            nominations[row['id']] = entry

        if row['nominees__id'] is not None:
            entry.nominees.append(NomineeEntry(
                id=row['nominees__id'],
                name=row['nominees__name'],
                image_url=row['nominees__image_url'],
                position=row['nominees__position'],
            ))

    return list(nominations.values())


# ==============================================================================
# VOTE LEDGER
# ==============================================================================

def _require_voting_open(settings_store):
    store = settings_store or get_settings_store()
    if not store.get(VOTING_OPEN, DEFAULTS[VOTING_OPEN]):
        raise VotingClosedError("Voting is closed")


def cast_vote(user_id, nomination_id, nominee_id, settings_store=None):
    """
    Record (or replace) a user's vote in one nomination.

    Flow:
    1. Validate that all identifiers are present
    2. Check that voting is open
    3. Check that the nominee exists and belongs to the nomination
    4. Create the user row if this is their first vote
    5. Upsert the vote on the (user, nomination) unique key

    Raises:
        InvalidVoteError: Missing identifier
        VotingClosedError: voting_open is False
        NomineeNotFoundError: Unknown nominee
        NomineeMismatchError: Nominee belongs to another nomination
    """
    if not user_id or not nomination_id or not nominee_id:
        raise InvalidVoteError("userId, nominationId and nomineeId are required")

    _require_voting_open(settings_store)

    real_nomination_id = Nominee.objects.filter(pk=nominee_id).values_list(
        'nomination_id', flat=True
    ).first()

    if real_nomination_id is None:
        raise NomineeNotFoundError("Nominee not found")

    if int(real_nomination_id) != int(nomination_id):
        raise NomineeMismatchError("Nominee does not belong to this nomination")

    with transaction.atomic():
        Voter.objects.get_or_create(id=user_id)
        # The (user, nomination) unique constraint keeps this to a single row
        # even when two requests for the same pair race.
        vote, created = Vote.objects.update_or_create(
            user_id=user_id,
            nomination_id=nomination_id,
            defaults={'nominee_id': nominee_id},
        )

    logger.info(
        f"Vote {'cast' if created else 'replaced'} - user: {user_id}, "
        f"nomination: {nomination_id}, nominee: {nominee_id}"
    )
    return vote


def retract_vote(user_id, nomination_id, settings_store=None):
    """
    Delete a user's vote in one nomination. Retracting a vote that
    does not exist is not an error.
    """
    if not user_id or not nomination_id:
        raise InvalidVoteError("userId and nominationId are required")

    _require_voting_open(settings_store)

    deleted, _ = Vote.objects.filter(user_id=user_id, nomination_id=nomination_id).delete()

    logger.info(f"Vote retracted - user: {user_id}, nomination: {nomination_id}, rows: {deleted}")
    return deleted


def list_votes_for_user(user_id) -> Dict[int, int]:
    """Map nomination id -> nominee id for every vote the user has cast."""
    rows = Vote.objects.filter(user_id=user_id).values_list('nomination_id', 'nominee_id')
    return {nomination_id: nominee_id for nomination_id, nominee_id in rows}


# ==============================================================================
# WINNER CALCULATION
# ==============================================================================

@dataclass(frozen=True)
class WinnerEntry:
    nomination: Nomination
    winner: Nominee
    votes: int


def _winning_rows(published_only):
    """
    First (nomination_id, nominee_id, votes) row per nomination from the
    per-nominee tally. The tally is ordered by vote count descending and
    then nominee id ascending, so the first row is the winner and ties go
    to the lowest nominee id.
    """
    queryset = Vote.objects.all()
    if published_only:
        queryset = queryset.filter(published_filter('nomination__'))

    tally = queryset.values('nomination_id', 'nominee_id').annotate(
        votes=Count('id')
    ).order_by('nomination_id', '-votes', 'nominee_id')

    winners = {}
    for row in tally:
        winners.setdefault(row['nomination_id'], row)
    return winners


def compute_winners(published_only=False) -> Dict[int, int]:
    """
    Map nomination id -> winning nominee id.
    Nominations without any vote have no entry.
    """
    return {
        nomination_id: row['nominee_id']
        for nomination_id, row in _winning_rows(published_only).items()
    }


def winner_details(published_only=False) -> List[WinnerEntry]:
    """
    Winners with their nomination and nominee objects and vote count,
    ordered by nomination position.
    """
    rows = _winning_rows(published_only)
    nominees = Nominee.objects.select_related('nomination').in_bulk(
        [row['nominee_id'] for row in rows.values()]
    )

    results = [
        WinnerEntry(
            nomination=nominees[row['nominee_id']].nomination,
            winner=nominees[row['nominee_id']],
            votes=row['votes'],
        )
        for row in rows.values()
    ]
    results.sort(key=lambda entry: (entry.nomination.position, entry.nomination.id))
    return results


def published_results(settings_store=None) -> List[WinnerEntry]:
    """
    Winners for the public results page.

    Raises:
        ResultsNotPublishedError: results_published is False
    """
    store = settings_store or get_settings_store()
    if not store.get(RESULTS_PUBLISHED, DEFAULTS[RESULTS_PUBLISHED]):
        raise ResultsNotPublishedError("Results have not been published yet")

    return winner_details(published_only=True)
