from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from apps.loyalty.services import LoyaltyService
from .models import User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """User admin with loyalty information"""
    list_display = [
        'username', 'email', 'phone', 'phone_verified', 'xp',
        'loyalty_level', 'custom_discount', 'is_staff', 'created_at'
    ]
    list_filter = ['is_staff', 'is_active', 'phone_verified', 'first_order_discount_used', 'created_at']
    search_fields = ['username', 'email', 'phone']
    ordering = ['-created_at']

    fieldsets = BaseUserAdmin.fieldsets + (
        ('Contact', {
            'fields': ('phone', 'phone_verified')
        }),
        ('Loyalty', {
            'fields': ('xp', 'loyalty_level', 'first_order_discount_used', 'custom_discount')
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )
    readonly_fields = ['created_at', 'updated_at', 'loyalty_level']

    def loyalty_level(self, obj):
        """Level name derived from XP"""
        status = LoyaltyService.get_user_status(obj)
        return f"{status.current_level} - {status.current.name}"
    loyalty_level.short_description = 'Loyalty level'
