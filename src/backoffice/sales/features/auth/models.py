from tortoise import fields

from ....common.models import TimestampMixin


class Seller(TimestampMixin):
    """A shop account (penjual). Every seller manages all buyers and orders."""

    id = fields.IntField(primary_key=True)
    username = fields.CharField(max_length=50, unique=True, db_index=True)
    hashed_password = fields.CharField(max_length=255)
    nama_lengkap = fields.CharField(max_length=100)

    def __str__(self):
        return f"{self.username} ({self.nama_lengkap})"

    class Meta:
        table = "sellers"
