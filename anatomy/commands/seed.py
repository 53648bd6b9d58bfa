"""CLI command: seed: create the demo server accounts and sample comments.

Safe to run repeatedly: existing accounts are left untouched and comments are
only added to an empty table.
"""

import logging

from anatomy.accounts import Comment, User
from anatomy.core import Anatomy

log = logging.getLogger(__name__)

DEMO_ACCOUNTS = [
    # (email, name, password, role)
    ("admin@admin.com", "Admin User", "admin", "admin"),
    ("user@user.com", "Subscribed User", "user", "user"),
    ("test@user.com", "Unsubscribed User", "testuser", "user"),
]

SAMPLE_COMMENTS = [
    (1, "Great breakdown of the biceps insertion."),
    (1, "Could you add a video on supination drills?"),
    (2, "The quadriceps section helped my knee rehab."),
]


def seed_accounts() -> dict[str, User]:
    """Create any missing demo accounts; return all of them keyed by email."""
    accounts = {}
    for email, name, password, role in DEMO_ACCOUNTS:
        user = User.get_or_none(User.email == email)
        if user is None:
            user = User(email=email, name=name, role=role, status="active")
            user.set_password(password)
            user.save()
            print(f"Created {role} account: {email}")
        else:
            print(f"Found existing account: {email}")
        accounts[email] = user
    return accounts


def seed_comments(accounts: dict[str, User]) -> int:
    if Comment.select().exists():
        return 0
    authors = list(accounts.values())
    for i, (post_id, content) in enumerate(SAMPLE_COMMENTS):
        Comment.create(post_id=post_id, content=content, author=authors[i % len(authors)])
    return len(SAMPLE_COMMENTS)


def run() -> None:
    with Anatomy():
        accounts = seed_accounts()
        created = seed_comments(accounts)
        print(f"Created {created} comments")
        print("Seeding finished.")
