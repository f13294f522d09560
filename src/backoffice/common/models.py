"""Models module for the backoffice services.

This module contains the common database models shared by the portal and
sales services. It includes a TimestampMixin class that provides created_at
and updated_at fields for models, as well as a utility function for
generating KSUIDs (K-Sortable Unique IDentifiers), which the portal uses as
opaque session identifiers."""

from tortoise import fields, models
from ksuid import ksuid


def generate_ksuid():
    """Generate a K-Sortable Unique IDentifier (KSUID).

    KSUIDs carry a timestamp prefix followed by 128 bits of randomness, so
    they are URL-safe, sortable chronologically and not guessable.

    Returns:
        str: A string representation of the generated KSUID.
    """
    return str(ksuid.Ksuid())


class TimestampMixin(models.Model):
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        abstract = True
