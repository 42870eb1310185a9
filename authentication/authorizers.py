"""
Authorizers for administrative API access.

An authorizer is any object with a single method:

    authorize(credential) -> bool

The active implementation is named by settings.ADMIN_AUTHORIZER so a
stronger scheme can replace the shared secret without touching views.
"""
from cryptography.hazmat.primitives import constant_time
from django.conf import settings
from django.utils.module_loading import import_string


def tokens_match(supplied, expected):
    """
    Exact comparison of two token strings in constant time.

    Args:
        supplied (str): Token sent by the client
        expected (str): Configured secret

    Returns:
        bool: True only if both are non-empty and identical
    """
    if not supplied or not expected:
        return False
    return constant_time.bytes_eq(supplied.encode(), expected.encode())


class SharedSecretAuthorizer:
    """
    Accepts a credential equal to the single configured ADMIN_TOKEN.
    With no token configured, every credential is rejected.
    """

    def __init__(self, secret=None):
        self.secret = settings.ADMIN_TOKEN if secret is None else secret

    def authorize(self, credential):
        return tokens_match(credential, self.secret)


def get_admin_authorizer():
    authorizer_class = import_string(settings.ADMIN_AUTHORIZER)
    return authorizer_class()
