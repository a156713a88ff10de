"""
Loyalty service: loads configuration from the settings store and applies
the level calculator to users.
"""
import logging

from django.contrib.auth import get_user_model
from django.db import transaction
from django.db.models import F

from apps.common.models import SiteSettings
from ..exceptions import InvalidInputError
from .config import LoyaltyConfig, resolve_loyalty_config
from .level_calculator import resolve_level, validate_xp, xp_earned_for_purchase

logger = logging.getLogger(__name__)


class LoyaltyService:
    """Service class for loyalty operations"""

    @staticmethod
    def get_config() -> LoyaltyConfig:
        """Read the settings row once and resolve defaults"""
        return resolve_loyalty_config(SiteSettings.load().as_record())

    @staticmethod
    def get_user_status(user, config=None):
        """Get the loyalty status of a user"""
        config = config or LoyaltyService.get_config()
        return resolve_level(user.xp, config)

    @staticmethod
    def award_purchase_xp(user_id, amount, config=None):
        """
        Add the XP earned for a purchase to the user's total.

        Returns:
            int: XP awarded.
        """
        config = config or LoyaltyService.get_config()
        earned = xp_earned_for_purchase(amount, config)
        if earned == 0:
            return 0

        User = get_user_model()
        updated = User.objects.filter(pk=user_id).update(xp=F('xp') + earned)
        if not updated:
            logger.warning(f"XP award skipped: user {user_id} not found")
            return 0

        logger.info(f"Awarded {earned} XP to user {user_id} for purchase of {amount}")
        return earned

    @staticmethod
    def set_user_xp(user, xp):
        """Overwrite a user's XP (back-office correction)"""
        try:
            xp = validate_xp(xp)
        except InvalidInputError:
            logger.warning(f"Rejected XP update for user {user.pk}: {xp!r}")
            raise

        with transaction.atomic():
            old_xp = user.xp
            user.xp = xp
            user.save(update_fields=['xp'])

        logger.info(f"XP for user {user.pk} changed from {old_xp} to {xp}")
        return user
