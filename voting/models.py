from django.db import models
from django.db.models import Q


def published_filter(prefix=''):
    """
    Q object matching nominations that are visible to the public.
    A NULL publication flag counts as published.
    """
    return Q(**{f'{prefix}is_published': True}) | Q(**{f'{prefix}is_published__isnull': True})


class Setting(models.Model):
    """
    Global boolean flag stored as a normalized string ("true"/"false").
    Read and written through voting.settings_store.
    """
    key = models.CharField(max_length=100, primary_key=True, verbose_name="Key")
    value = models.CharField(max_length=255, verbose_name="Value")
    updated_at = models.DateTimeField(auto_now=True, verbose_name="Last Updated")

    class Meta:
        db_table = 'settings'
        verbose_name = "Setting"
        verbose_name_plural = "Settings"
        ordering = ['key']

    def __str__(self):
        return f"{self.key} = {self.value}"


class Nomination(models.Model):
    """
    A voting category (nomination) with an ordered list of nominees.
    Edited out of band through Django admin; read-only to the API.
    """
    title = models.CharField(max_length=255, verbose_name="Title")
    description = models.TextField(blank=True, default='', verbose_name="Description")
    position = models.IntegerField(
        default=0,
        verbose_name="Position",
        help_text="Display order (lower = first)"
    )
    image_url = models.URLField(
        max_length=500,
        null=True,
        blank=True,
        db_column='imageurl',
        verbose_name="Image URL"
    )
    is_published = models.BooleanField(
        null=True,
        default=True,
        verbose_name="Published",
        help_text="If False, the nomination is hidden from the public API"
    )

    class Meta:
        db_table = 'nominations'
        verbose_name = "Nomination"
        verbose_name_plural = "Nominations"
        ordering = ['position', 'id']

    def __str__(self):
        return self.title


class Nominee(models.Model):
    """
    A candidate belonging to exactly one nomination.
    """
    nomination = models.ForeignKey(
        Nomination,
        on_delete=models.CASCADE,
        related_name='nominees',
        verbose_name="Nomination"
    )
    name = models.CharField(max_length=255, verbose_name="Name")
    image_url = models.URLField(
        max_length=500,
        null=True,
        blank=True,
        verbose_name="Image URL"
    )
    position = models.IntegerField(
        default=0,
        verbose_name="Position",
        help_text="Display order within the nomination (lower = first)"
    )

    class Meta:
        db_table = 'nominees'
        verbose_name = "Nominee"
        verbose_name_plural = "Nominees"
        ordering = ['position', 'id']
        indexes = [
            models.Index(fields=['nomination', 'position'], name='nominees_nom_pos_idx'),
        ]

    def __str__(self):
        return f"{self.name} - {self.nomination.title}"


class Voter(models.Model):
    """
    A voting user. The id is an opaque string supplied by the client;
    the row is created lazily on the first vote.
    """
    id = models.CharField(max_length=255, primary_key=True, verbose_name="User ID")
    created_at = models.DateTimeField(auto_now_add=True, verbose_name="First Vote")

    class Meta:
        db_table = 'users'
        verbose_name = "User"
        verbose_name_plural = "Users"

    def __str__(self):
        return self.id


class Vote(models.Model):
    """
    A user's current choice within one nomination.
    At most one row per (user, nomination); re-voting replaces the nominee.
    """
    user = models.ForeignKey(
        Voter,
        on_delete=models.CASCADE,
        related_name='votes',
        verbose_name="User"
    )
    nomination = models.ForeignKey(
        Nomination,
        on_delete=models.PROTECT,
        related_name='votes',
        verbose_name="Nomination"
    )
    nominee = models.ForeignKey(
        Nominee,
        on_delete=models.PROTECT,
        related_name='votes',
        verbose_name="Nominee"
    )
    created_at = models.DateTimeField(auto_now_add=True, verbose_name="Cast At")
    updated_at = models.DateTimeField(auto_now=True, verbose_name="Last Changed")

    class Meta:
        db_table = 'votes'
        verbose_name = "Vote"
        verbose_name_plural = "Votes"
        unique_together = ('user', 'nomination')
        indexes = [
            models.Index(fields=['nomination', 'nominee'], name='votes_nom_nominee_idx'),
        ]

    def __str__(self):
        return f"{self.user_id} voted for {self.nominee_id} in {self.nomination_id}"
