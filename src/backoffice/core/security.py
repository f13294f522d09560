import datetime

import bcrypt


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return bcrypt.checkpw(plain_password.encode('utf-8'), hashed_password.encode('utf-8'))

def get_password_hash(password: str) -> str:
    hashed = bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt())
    return hashed.decode('utf-8')

def utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)

def as_utc(value: datetime.datetime) -> datetime.datetime:
    """Normalise a stored timestamp to an aware UTC datetime.

    Timestamps are stored in UTC; depending on the backend they come back
    naive or aware.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=datetime.timezone.utc)
    return value.astimezone(datetime.timezone.utc)
