from authentication.authorizers import (
    SharedSecretAuthorizer,
    get_admin_authorizer,
    tokens_match,
)


class AllowAllAuthorizer:
    def authorize(self, credential):
        return True


class TestTokensMatch:
    def test_identical(self):
        assert tokens_match('s3cret', 's3cret') is True

    def test_different(self):
        assert tokens_match('s3cret', 'S3CRET') is False
        assert tokens_match('s3cret ', 's3cret') is False

    def test_empty_values_never_match(self):
        assert tokens_match('', '') is False
        assert tokens_match(None, 's3cret') is False
        assert tokens_match('s3cret', '') is False


class TestSharedSecretAuthorizer:
    def test_uses_configured_token(self, settings):
        settings.ADMIN_TOKEN = 'configured'
        authorizer = SharedSecretAuthorizer()
        assert authorizer.authorize('configured')
        assert not authorizer.authorize('other')

    def test_no_configured_token_rejects_everything(self, settings):
        settings.ADMIN_TOKEN = ''
        assert not SharedSecretAuthorizer().authorize('')
        assert not SharedSecretAuthorizer().authorize('anything')

    def test_explicit_secret(self):
        assert SharedSecretAuthorizer(secret='abc').authorize('abc')


def test_authorizer_is_pluggable(settings):
    settings.ADMIN_AUTHORIZER = 'tests.test_authorizers.AllowAllAuthorizer'
    assert isinstance(get_admin_authorizer(), AllowAllAuthorizer)
