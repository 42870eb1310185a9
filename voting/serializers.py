"""
Django REST Framework serializers for voting app.

These serializers handle JSON serialization/deserialization for:
- Nomination catalog (nominations with nested nominees)
- Vote casting and retraction
- Results (winners)
- Admin settings updates
"""

from rest_framework import serializers

from .settings_store import DEFAULTS

# Largest value of the BigAutoField primary keys
MAX_ID = 2 ** 63 - 1


class NomineeSerializer(serializers.Serializer):
    """
    A nominee as shown inside its nomination.
    """
    id = serializers.IntegerField()
    name = serializers.CharField()
    imageUrl = serializers.CharField(source='image_url', allow_null=True)
    position = serializers.IntegerField()


class NominationSerializer(serializers.Serializer):
    """
    A nomination with its nominees in position order.
    Works on voting.services.NominationEntry objects.
    """
    id = serializers.IntegerField()
    title = serializers.CharField()
    description = serializers.CharField(allow_blank=True)
    position = serializers.IntegerField()
    imageUrl = serializers.CharField(source='image_url', allow_null=True)
    nominees = NomineeSerializer(many=True)


class CastVoteSerializer(serializers.Serializer):
    """
    Request body for POST /vote.
    """
    userId = serializers.CharField(max_length=255)
    nominationId = serializers.IntegerField(min_value=1, max_value=MAX_ID)
    nomineeId = serializers.IntegerField(min_value=1, max_value=MAX_ID)


class RetractVoteSerializer(serializers.Serializer):
    """
    Request body for POST /unvote.
    """
    userId = serializers.CharField(max_length=255)
    nominationId = serializers.IntegerField(min_value=1, max_value=MAX_ID)


class ResultNominationSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    title = serializers.CharField()
    position = serializers.IntegerField()
    imageUrl = serializers.CharField(source='image_url', allow_null=True)


class ResultNomineeSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()
    imageUrl = serializers.CharField(source='image_url', allow_null=True)


class ResultSerializer(serializers.Serializer):
    """
    One winner per nomination, with its vote count.
    Works on voting.services.WinnerEntry objects.
    """
    nomination = ResultNominationSerializer()
    winner = ResultNomineeSerializer()
    votes = serializers.IntegerField()


class SettingUpdateSerializer(serializers.Serializer):
    """
    Request body for POST /admin/status.
    Only the known voting flags may be written.
    """
    key = serializers.ChoiceField(choices=list(DEFAULTS))
    value = serializers.BooleanField(required=False, default=False, allow_null=True)

    def validate_value(self, value):
        """A null value switches the flag off, like a missing one."""
        return bool(value)
