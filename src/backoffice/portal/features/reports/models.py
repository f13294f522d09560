from tortoise import fields

from ....common.models import TimestampMixin


class Report(TimestampMixin):
    """A citizen report (laporan), owned by the user who filed it."""

    id = fields.IntField(primary_key=True)
    user: fields.ForeignKeyRelation["User"] = fields.ForeignKeyField(
        "models.User", related_name="reports", on_delete=fields.CASCADE
    )
    nama = fields.CharField(max_length=255, default="Anonim")
    email = fields.CharField(max_length=255, default="-")
    kategori = fields.CharField(max_length=100, null=True)
    isi = fields.TextField()
    status = fields.CharField(max_length=50, default="pending")

    def __str__(self):
        return f"Report {self.id} by user {self.user_id} - Status: {self.status}"

    class Meta:
        table = "reports"
