"""
Admin configuration for voting app
"""
from django.contrib import admin
from django.db.models import Count
from django.utils.html import format_html
from .models import Setting, Nomination, Nominee, Voter, Vote


class NomineeInline(admin.TabularInline):
    """
    Inline admin for Nominees within Nomination
    """
    model = Nominee
    extra = 2
    fields = ('name', 'position', 'image_url')
    ordering = ('position',)


@admin.register(Nomination)
class NominationAdmin(admin.ModelAdmin):
    """
    Admin interface for Nomination model
    """
    list_display = ('title', 'position', 'publication_status', 'nominee_count', 'total_votes')
    list_filter = ('is_published',)
    search_fields = ('title', 'description')
    ordering = ('position', 'id')

    fieldsets = (
        ('Main Information', {
            'fields': ('title', 'description', 'image_url')
        }),
        ('Display', {
            'fields': ('position', 'is_published')
        }),
    )

    inlines = [NomineeInline]

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(
            _nominee_count=Count('nominees', distinct=True),
            _vote_count=Count('votes', distinct=True),
        )

    def publication_status(self, obj):
        if obj.is_published is False:
            return format_html('<span style="color: red;">● Hidden</span>')
        return format_html('<span style="color: green;">● Published</span>')
    publication_status.short_description = "Status"

    def nominee_count(self, obj):
        return obj._nominee_count
    nominee_count.short_description = "Nominees"

    def total_votes(self, obj):
        return obj._vote_count
    total_votes.short_description = "Votes"


@admin.register(Nominee)
class NomineeAdmin(admin.ModelAdmin):
    """
    Admin interface for Nominee model
    """
    list_display = ('name', 'nomination', 'position', 'vote_count')
    list_filter = ('nomination',)
    search_fields = ('name', 'nomination__title')
    ordering = ('nomination__position', 'position')

    def vote_count(self, obj):
        """Show number of votes for this nominee"""
        return format_html('<strong>{}</strong>', obj.votes.count())
    vote_count.short_description = "Votes Received"


@admin.register(Vote)
class VoteAdmin(admin.ModelAdmin):
    """
    Admin interface for Vote model.
    Votes are written only through the API.
    """
    list_display = ('user', 'nomination', 'nominee', 'updated_at')
    list_filter = ('nomination',)
    search_fields = ('user__id', 'nominee__name')
    ordering = ('-updated_at',)
    readonly_fields = ('user', 'nomination', 'nominee', 'created_at', 'updated_at')

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        """Only superusers can delete votes"""
        return request.user.is_superuser


@admin.register(Voter)
class VoterAdmin(admin.ModelAdmin):
    list_display = ('id', 'created_at')
    search_fields = ('id',)
    readonly_fields = ('id', 'created_at')

    def has_add_permission(self, request):
        return False


@admin.register(Setting)
class SettingAdmin(admin.ModelAdmin):
    """
    Voting flags. Prefer POST /admin/status, which normalizes the value.
    """
    list_display = ('key', 'value', 'updated_at')
    readonly_fields = ('updated_at',)
