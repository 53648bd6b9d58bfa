"""Server-side account and comment models.

These back the REST endpoints and are verified on the server with password
hashes.  They are unrelated to the demo Session Store, which never reads
or writes these tables.
"""

from datetime import UTC, datetime

from flask_login import UserMixin
from peewee import BooleanField, CharField, ForeignKeyField, IntegerField, Model, TextField
from werkzeug.security import check_password_hash, generate_password_hash

from .db import db


def _now_ts() -> int:
    return int(datetime.now(UTC).timestamp())


class User(UserMixin, Model):
    """A registered account."""

    email = CharField(unique=True)
    name = CharField(default="")
    password_hash = CharField()
    # "admin" | "user"
    role = CharField(default="user")
    # "active" can log in, "inactive" is disabled
    status = CharField(default="active")
    created = IntegerField(default=_now_ts)  # Unix timestamp

    class Meta:
        database = db
        table_name = "user"

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"

    @property
    def is_active(self) -> bool:
        return self.status == "active"

    def set_password(self, password: str) -> None:
        self.password_hash = generate_password_hash(password)

    def check_password(self, password: str) -> bool:
        return check_password_hash(self.password_hash, password)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "role": self.role,
            "status": self.status,
            "createdAt": datetime.fromtimestamp(self.created, UTC).isoformat(),
        }


class Comment(Model):
    """A comment left by an account on a post."""

    content = TextField()
    post_id = IntegerField(index=True)
    author = ForeignKeyField(User, backref="comments", on_delete="CASCADE")
    approved = BooleanField(default=True)
    created = IntegerField(default=_now_ts)  # Unix timestamp

    class Meta:
        database = db
        table_name = "comment"

    def to_dict(self, include_author: bool = False) -> dict:
        data = {
            "id": self.id,
            "content": self.content,
            "postId": self.post_id,
            "authorId": self.author_id,
            "approved": self.approved,
            "createdAt": datetime.fromtimestamp(self.created, UTC).isoformat(),
        }
        if include_author:
            data["author"] = self.author.to_dict()
        return data


def comments_for_post(post_id: int) -> list[Comment]:
    """Comments on *post_id*, newest first, with authors joined in."""
    return list(
        Comment.select(Comment, User)
        .join(User)
        .where(Comment.post_id == post_id)
        .order_by(Comment.created.desc(), Comment.id.desc())
    )
