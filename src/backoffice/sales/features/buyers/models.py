from tortoise import fields, models


class Buyer(models.Model):
    buyer_id = fields.IntField(primary_key=True)
    nama = fields.CharField(max_length=100)
    alamat = fields.TextField()
    no_hp = fields.CharField(max_length=20)
    created_at = fields.DatetimeField(auto_now_add=True)

    orders: fields.ReverseRelation["Order"]

    def __str__(self):
        return f"{self.nama} ({self.no_hp})"

    class Meta:
        table = "buyers"
