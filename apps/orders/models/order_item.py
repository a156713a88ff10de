from django.db import models


class OrderItem(models.Model):
    """Order line: a tea sold by weight"""

    order = models.ForeignKey('Order', on_delete=models.CASCADE, related_name='items')
    product_id = models.IntegerField(help_text="Catalog product id")
    name = models.CharField(max_length=200, help_text="Product name snapshot")
    price_per_gram = models.DecimalField(max_digits=10, decimal_places=2)
    quantity = models.PositiveIntegerField(help_text="Quantity in grams")
    amount = models.DecimalField(max_digits=12, decimal_places=2, help_text="Line total (quantity * price)")

    class Meta:
        db_table = 'order_items'

    def __str__(self):
        return f"{self.name} x {self.quantity}g"

    def save(self, *args, **kwargs):
        # Calculate amount if not set
        if self.amount is None:
            self.amount = self.quantity * self.price_per_gram
        super().save(*args, **kwargs)
