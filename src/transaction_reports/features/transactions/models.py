"""Data model for the product transaction collection."""

from tortoise import fields, models


class ProductTransaction(models.Model):
    # Internal row id; the source identifier lives in product_id
    id = fields.IntField(primary_key=True)
    product_id = fields.IntField(null=True, description="Source-provided identifier, not unique")
    title = fields.TextField(null=True)
    price = fields.FloatField(null=True)
    description = fields.TextField(null=True)
    category = fields.CharField(max_length=255, null=True, db_index=True)
    image = fields.TextField(null=True)
    sold = fields.BooleanField(null=True)
    # Kept as text: month filtering matches on "-MM-" substrings, never parses a date
    date_of_sale = fields.CharField(max_length=64, null=True)

    def __str__(self):
        return f"{self.title} ({self.date_of_sale}, ${self.price})"

    class Meta:
        table = "product_transactions"
