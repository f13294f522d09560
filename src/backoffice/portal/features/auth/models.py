from tortoise import fields

from ....common.models import TimestampMixin, generate_ksuid
from ....core.access import Role


class User(TimestampMixin):
    id = fields.IntField(primary_key=True)
    username = fields.CharField(max_length=100, unique=True, db_index=True)
    hashed_password = fields.CharField(max_length=255)
    role = fields.CharEnumField(Role, max_length=20, default=Role.USER)

    sessions: fields.ReverseRelation["Session"]
    reports: fields.ReverseRelation["Report"]

    def __str__(self):
        return f"{self.username} ({self.role.value})"

    class Meta:
        table = "users"


class Session(TimestampMixin):
    """Server-side login session; only `session_id` ever leaves the server."""

    id = fields.IntField(primary_key=True)
    session_id = fields.CharField(
        max_length=27, unique=True, default=generate_ksuid, db_index=True
    )
    user: fields.ForeignKeyRelation[User] = fields.ForeignKeyField(
        "models.User", related_name="sessions", on_delete=fields.CASCADE
    )
    expires_at = fields.DatetimeField()

    def __str__(self):
        return f"Session for user {self.user_id} until {self.expires_at}"

    class Meta:
        table = "sessions"
