from django.db import models
from django.conf import settings


class AdminAuditLog(models.Model):
    """Audit log for back-office changes (settings, quiz, user XP, orders)"""

    ACTION_CHOICES = [
        ('CREATE', 'Create'),
        ('UPDATE', 'Update'),
        ('DELETE', 'Delete'),
    ]

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='audit_logs'
    )
    action = models.CharField(max_length=10, choices=ACTION_CHOICES)
    model_name = models.CharField(max_length=100, null=True, blank=True)
    object_id = models.CharField(max_length=100, null=True, blank=True)
    object_repr = models.CharField(max_length=200, null=True, blank=True)
    message = models.TextField()
    changes = models.JSONField(default=dict, blank=True)
    ip_address = models.GenericIPAddressField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'admin_audit_logs'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['user', 'created_at']),
            models.Index(fields=['model_name', 'created_at']),
        ]

    def __str__(self):
        actor = self.user.username if self.user else 'system'
        return f"{actor} - {self.action} - {self.model_name}"

    @classmethod
    def record(cls, request, instance, message, changes=None, action='UPDATE'):
        """Write an audit entry for a change made through the admin API"""
        user = getattr(request, 'user', None)
        if user is not None and not user.is_authenticated:
            user = None
        return cls.objects.create(
            user=user,
            action=action,
            model_name=instance._meta.model_name,
            object_id=str(instance.pk),
            object_repr=str(instance)[:200],
            message=message,
            changes=changes or {},
            ip_address=request.META.get('REMOTE_ADDR') if request is not None else None,
        )
