from peewee import Model

from .accounts import Comment, User
from .db import get_db
from .storage import StoreEntry


def migrate_tables(models: list[type[Model]]) -> None:
    db = get_db()
    db.connect(reuse_if_open=True)
    db.create_tables(models, safe=True)
    db.close()


def get_all_models() -> list[type[Model]]:
    return [
        StoreEntry,
        User,
        Comment,
    ]
