"""
Voting app URLs - catalog, votes, results, admin settings
"""
from django.urls import path
from .views import (
    StatusView,
    NominationListView,
    MyVotesView,
    CastVoteView,
    RetractVoteView,
    ResultsView,
    AdminStatusView,
    AdminResultsView,
)

app_name = 'voting'

urlpatterns = [
    path('status', StatusView.as_view(), name='status'),
    path('nominations', NominationListView.as_view(), name='nominations'),

    # GET /my-votes?userId=u1
    path('my-votes', MyVotesView.as_view(), name='my_votes'),
    path('vote', CastVoteView.as_view(), name='vote'),
    path('unvote', RetractVoteView.as_view(), name='unvote'),

    # Only once results_published is true
    path('results', ResultsView.as_view(), name='results'),

    # Require X-Admin-Token
    path('admin/status', AdminStatusView.as_view(), name='admin_status'),
    path('admin/results', AdminResultsView.as_view(), name='admin_results'),
]
