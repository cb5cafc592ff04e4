from django.db import models
import uuid


class Platform(models.Model):
    """Shop / marketplace account a user books phones on."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='platforms'
    )
    name = models.CharField(max_length=100)
    account_alias = models.CharField(max_length=200)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'platforms'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.name} ({self.account_alias})"
