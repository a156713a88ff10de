from django.db import models
from django.conf import settings


class Order(models.Model):
    """Customer order; completing it awards loyalty XP to the customer"""

    STATUS_PENDING = 'pending'
    STATUS_PAID = 'paid'
    STATUS_SHIPPED = 'shipped'
    STATUS_COMPLETED = 'completed'
    STATUS_CANCELLED = 'cancelled'

    STATUS_CHOICES = [
        (STATUS_PENDING, 'Pending'),
        (STATUS_PAID, 'Paid'),
        (STATUS_SHIPPED, 'Shipped'),
        (STATUS_COMPLETED, 'Completed'),
        (STATUS_CANCELLED, 'Cancelled'),
    ]

    order_number = models.CharField(max_length=32, unique=True)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='orders',
        help_text="Empty for guest checkout"
    )

    # Contact and delivery
    name = models.CharField(max_length=100)
    email = models.EmailField()
    phone = models.CharField(max_length=20)
    address = models.TextField()
    comment = models.TextField(blank=True, default='')

    # Pricing
    subtotal = models.DecimalField(max_digits=12, decimal_places=2)
    first_order_discount = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    loyalty_discount = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    custom_discount = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    discount_details = models.JSONField(default=dict, blank=True, help_text="Applied discount percentages")
    total = models.DecimalField(max_digits=12, decimal_places=2)

    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_PENDING)
    xp_awarded = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'orders'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['user', 'created_at']),
            models.Index(fields=['status']),
        ]

    def __str__(self):
        return f"Order {self.order_number}"

    @property
    def total_discount(self):
        return self.first_order_discount + self.loyalty_discount + self.custom_discount
