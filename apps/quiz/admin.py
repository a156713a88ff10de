from django.contrib import admin

from .models import QuizConfiguration


@admin.register(QuizConfiguration)
class QuizConfigurationAdmin(admin.ModelAdmin):
    """Admin interface for the tea quiz"""

    list_display = ['__str__', 'updated_at', 'updated_by']
    readonly_fields = ['updated_at', 'updated_by']

    def has_add_permission(self, request):
        return not QuizConfiguration.objects.exists()

    def has_delete_permission(self, request, obj=None):
        return False
