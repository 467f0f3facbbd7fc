"""Peewee ORM model definitions"""

from datetime import datetime
from zoneinfo import ZoneInfo

from peewee import (
    BooleanField,
    CharField,
    DatabaseProxy,
    DateTimeField,
    ForeignKeyField,
    IntegerField,
    Model,
)
from playhouse.shortcuts import ThreadSafeDatabaseMetadata
from playhouse.sqlite_ext import JSONField

UTC = ZoneInfo("UTC")

# Use DatabaseProxy for deferred database binding
database_proxy = DatabaseProxy()


class BaseModel(Model):
    """Base model class - supports thread-safe metadata"""

    class Meta:
        database = database_proxy
        model_metadata_class = ThreadSafeDatabaseMetadata


class TimestampedModel(BaseModel):
    created_at = DateTimeField(default=lambda: datetime.now(UTC))
    updated_at = DateTimeField(default=lambda: datetime.now(UTC))

    def save(self, *args, **kwargs):
        """Override save method to auto-update updated_at"""
        if self._pk is not None:
            self.updated_at = datetime.now(UTC)
        return super().save(*args, **kwargs)


class Page(TimestampedModel):
    """Marketing page that sections are placed on"""

    slug = CharField(unique=True)
    title = CharField(default="")

    class Meta:
        table_name = "pages"


class Section(TimestampedModel):
    """Section model, one content entry of a page"""

    page = ForeignKeyField(Page, backref="sections", on_delete="CASCADE")
    section_type = CharField()
    content = JSONField(default=dict)
    published = BooleanField(default=False)
    order_index = IntegerField(default=0)

    class Meta:
        table_name = "sections"
        indexes = ((("page", "order_index"), False),)
