"""
Voting views - status, nominations, votes, results, admin settings
"""
from rest_framework import status
from rest_framework.exceptions import ParseError, UnsupportedMediaType
from rest_framework.response import Response
from rest_framework.views import APIView
import logging

from authentication.mixins import AdminTokenRequiredMixin
from . import services
from .serializers import (
    NominationSerializer,
    CastVoteSerializer,
    RetractVoteSerializer,
    ResultSerializer,
    SettingUpdateSerializer,
)
from .settings_store import get_settings_store, RESULTS_PUBLISHED, DEFAULTS

logger = logging.getLogger(__name__)

INTERNAL_ERROR = {'error': 'Internal server error'}


def _malformed_body():
    return Response({'error': 'Request body must be valid JSON'}, status=status.HTTP_400_BAD_REQUEST)


class StatusView(APIView):
    """
    Public voting phase: whether voting is open and results are published.
    """

    def get(self, request):
        try:
            return Response(get_settings_store().snapshot())
        except Exception as e:
            logger.error(f"Error reading status: {e}", exc_info=True)
            return Response(INTERNAL_ERROR, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


class NominationListView(APIView):
    """
    List published nominations with their nominees.

    Example:
        GET /nominations  →  {"nominations": [{"id": 1, ..., "nominees": [...]}]}
    """

    def get(self, request):
        try:
            nominations = services.list_nominations(published_only=True)
            serializer = NominationSerializer(nominations, many=True)

            logger.info(f"Listed {len(nominations)} nomination(s)")

            return Response({'nominations': serializer.data})

        except Exception as e:
            logger.error(f"Error listing nominations: {e}", exc_info=True)
            return Response(INTERNAL_ERROR, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


class MyVotesView(APIView):
    """
    Votes already cast by one user.

    Query params:
        userId (required): opaque user identifier

    Returns:
        {"votes": {"<nominationId>": <nomineeId>, ...}}
    """

    def get(self, request):
        try:
            user_id = request.query_params.get('userId', '').strip()
            if not user_id:
                return Response({
                    'error': 'userId is required'
                }, status=status.HTTP_400_BAD_REQUEST)

            votes = services.list_votes_for_user(user_id)

            return Response({'votes': votes})

        except Exception as e:
            logger.error(f"Error retrieving votes: {e}", exc_info=True)
            return Response(INTERNAL_ERROR, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


class CastVoteView(APIView):
    """
    Cast or change a vote.

    Request body:
    - userId: str
    - nominationId: int
    - nomineeId: int

    Voting again in the same nomination replaces the previous choice.
    """

    def post(self, request):
        try:
            serializer = CastVoteSerializer(data=request.data)

            if not serializer.is_valid():
                return Response({
                    'error': 'userId, nominationId and nomineeId are required',
                    'detail': serializer.errors
                }, status=status.HTTP_400_BAD_REQUEST)

            data = serializer.validated_data
            services.cast_vote(
                user_id=data['userId'],
                nomination_id=data['nominationId'],
                nominee_id=data['nomineeId'],
            )

            return Response({'success': True})

        except (ParseError, UnsupportedMediaType):
            return _malformed_body()

        except services.VotingError as e:
            logger.warning(f"Vote rejected: {e}")
            return Response({'error': str(e)}, status=e.status_code)

        except Exception as e:
            logger.error(f"Error casting vote: {e}", exc_info=True)
            return Response(INTERNAL_ERROR, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


class RetractVoteView(APIView):
    """
    Retract a vote. Succeeds even if the user never voted in the nomination.

    Request body:
    - userId: str
    - nominationId: int
    """

    def post(self, request):
        try:
            serializer = RetractVoteSerializer(data=request.data)

            if not serializer.is_valid():
                return Response({
                    'error': 'userId and nominationId are required',
                    'detail': serializer.errors
                }, status=status.HTTP_400_BAD_REQUEST)

            data = serializer.validated_data
            services.retract_vote(
                user_id=data['userId'],
                nomination_id=data['nominationId'],
            )

            return Response({'success': True})

        except (ParseError, UnsupportedMediaType):
            return _malformed_body()

        except services.VotingError as e:
            logger.warning(f"Retraction rejected: {e}")
            return Response({'error': str(e)}, status=e.status_code)

        except Exception as e:
            logger.error(f"Error retracting vote: {e}", exc_info=True)
            return Response(INTERNAL_ERROR, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


class ResultsView(APIView):
    """
    Public winners, available only once results are published.
    """

    def get(self, request):
        try:
            winners = services.published_results()
            return Response({'results': ResultSerializer(winners, many=True).data})

        except services.ResultsNotPublishedError as e:
            return Response({'error': str(e)}, status=e.status_code)

        except Exception as e:
            logger.error(f"Error computing results: {e}", exc_info=True)
            return Response(INTERNAL_ERROR, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


# ==============================================================================
# ADMIN
# ==============================================================================

class AdminStatusView(AdminTokenRequiredMixin, APIView):
    """
    Read or change the global voting flags.

    POST body:
    - key: "voting_open" | "results_published"
    - value: bool
    """

    def get(self, request):
        try:
            return Response(get_settings_store().snapshot())
        except Exception as e:
            logger.error(f"Error reading admin status: {e}", exc_info=True)
            return Response(INTERNAL_ERROR, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    def post(self, request):
        try:
            serializer = SettingUpdateSerializer(data=request.data)

            if not serializer.is_valid():
                message = 'Invalid key' if 'key' in serializer.errors else 'Invalid value'
                return Response({
                    'error': message,
                    'detail': serializer.errors
                }, status=status.HTTP_400_BAD_REQUEST)

            key = serializer.validated_data['key']
            value = serializer.validated_data['value']
            get_settings_store().set(key, value)

            logger.info(f"Admin changed {key} to {value}")

            return Response({'success': True})

        except (ParseError, UnsupportedMediaType):
            return _malformed_body()

        except Exception as e:
            logger.error(f"Error updating admin status: {e}", exc_info=True)
            return Response(INTERNAL_ERROR, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


class AdminResultsView(AdminTokenRequiredMixin, APIView):
    """
    Winners for every nomination, whether or not results are published.
    """

    def get(self, request):
        try:
            winners = services.winner_details(published_only=False)
            published = get_settings_store().get(RESULTS_PUBLISHED, DEFAULTS[RESULTS_PUBLISHED])

            return Response({
                'results': ResultSerializer(winners, many=True).data,
                'published': published
            })

        except Exception as e:
            logger.error(f"Error computing admin results: {e}", exc_info=True)
            return Response(INTERNAL_ERROR, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
