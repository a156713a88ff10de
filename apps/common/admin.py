from django.contrib import admin

from .models import AdminAuditLog, SiteSettings


@admin.register(SiteSettings)
class SiteSettingsAdmin(admin.ModelAdmin):
    """Admin interface for the single site settings row"""

    list_display = ['__str__', 'first_order_discount', 'xp_multiplier', 'updated_at', 'updated_by']
    readonly_fields = ['updated_at', 'updated_by']

    fieldsets = (
        ('Design', {
            'fields': ('design_mode',)
        }),
        ('Promotions', {
            'fields': ('first_order_discount', 'xp_multiplier')
        }),
        ('Loyalty Thresholds', {
            'fields': (
                ('loyalty_level2_min_xp', 'loyalty_level2_discount'),
                ('loyalty_level3_min_xp', 'loyalty_level3_discount'),
                ('loyalty_level4_min_xp', 'loyalty_level4_discount'),
            )
        }),
        ('Loyalty Perks', {
            'fields': (
                'loyalty_level1_perks', 'loyalty_level2_perks',
                'loyalty_level3_perks', 'loyalty_level4_perks',
            ),
            'classes': ('collapse',)
        }),
        ('Audit', {
            'fields': ('updated_at', 'updated_by'),
            'classes': ('collapse',)
        }),
    )

    def has_add_permission(self, request):
        return not SiteSettings.objects.exists()

    def has_delete_permission(self, request, obj=None):
        return False

    def save_model(self, request, obj, form, change):
        obj.updated_by = request.user
        super().save_model(request, obj, form, change)


@admin.register(AdminAuditLog)
class AdminAuditLogAdmin(admin.ModelAdmin):
    """Read-only audit trail"""

    list_display = ['created_at', 'user', 'action', 'model_name', 'object_id', 'message']
    list_filter = ['action', 'model_name', 'created_at']
    search_fields = ['message', 'object_repr', 'user__username']
    readonly_fields = [f.name for f in AdminAuditLog._meta.fields]
    ordering = ['-created_at']

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
