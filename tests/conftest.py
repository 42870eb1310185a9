"""Shared test fixtures."""

import pytest
from rest_framework.test import APIClient

from voting.models import Nomination, Nominee, Setting, Vote, Voter

ADMIN_TOKEN = 'test-admin-token'


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def admin_token(settings):
    settings.ADMIN_TOKEN = ADMIN_TOKEN
    return ADMIN_TOKEN


@pytest.fixture
def admin_client(admin_token):
    client = APIClient()
    client.credentials(HTTP_X_ADMIN_TOKEN=admin_token)
    return client


@pytest.fixture
def catalog(db):
    """
    Four public nominations and one hidden one.
    Nominees are created out of position order on purpose.
    """
    hidden = Nomination.objects.create(title='Hidden Award', position=0, is_published=False)
    film = Nomination.objects.create(title='Best Film', description='Feature films', position=1)
    actor = Nomination.objects.create(title='Best Actor', position=2)
    score = Nomination.objects.create(title='Best Score', position=3)
    legacy = Nomination.objects.create(title='Lifetime Achievement', position=4, is_published=None)

    return {
        'hidden': hidden,
        'film': film,
        'actor': actor,
        'score': score,
        'legacy': legacy,
        'hidden_nominee': Nominee.objects.create(nomination=hidden, name='Secret', position=1),
        'film_second': Nominee.objects.create(nomination=film, name='Zeta', position=2),
        'film_first': Nominee.objects.create(
            nomination=film, name='Alpha', position=1, image_url='https://example.com/alpha.png'
        ),
        'actor_only': Nominee.objects.create(nomination=actor, name='Bob', position=1),
        'legacy_only': Nominee.objects.create(nomination=legacy, name='Veteran', position=1),
    }


def set_flag(key, value):
    Setting.objects.update_or_create(key=key, defaults={'value': 'true' if value else 'false'})


def add_votes(nominee, count, prefix):
    """Create `count` votes for nominee from fresh users."""
    for i in range(count):
        voter = Voter.objects.create(id=f'{prefix}-{i}')
        Vote.objects.create(user=voter, nomination=nominee.nomination, nominee=nominee)
