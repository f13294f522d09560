from enum import Enum

from tortoise import fields, models


class OrderStatus(str, Enum):
    PENDING = "pending"
    ON_PROCESS = "on process"
    DONE = "done"


# Fixed presentation order for status breakdowns.
STATUS_ORDER = (OrderStatus.PENDING, OrderStatus.ON_PROCESS, OrderStatus.DONE)


class Order(models.Model):
    order_id = fields.IntField(primary_key=True)
    buyer: fields.ForeignKeyRelation["Buyer"] = fields.ForeignKeyField(
        "models.Buyer", related_name="orders", on_delete=fields.RESTRICT
    )
    orderdate = fields.DateField()
    subtotal = fields.BigIntField(description="Whole rupiah, multiple of the unit price")
    jumlah_produk = fields.IntField(default=0, description="Derived: subtotal / unit price")
    status = fields.CharEnumField(OrderStatus, max_length=20, default=OrderStatus.PENDING)
    created_at = fields.DatetimeField(auto_now_add=True)

    def __str__(self):
        return f"Order {self.order_id} ({self.jumlah_produk} products) - Status: {self.status.value}"

    class Meta:
        table = "orders"
