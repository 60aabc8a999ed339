"""
Load family accounts from a JSON file.

Families are never created through the API. Usage:

    python -m coopboard.seed families.json [--create-tables]

where the file holds a list of objects with ``username``, ``display_name``
and optionally ``is_admin``.
"""
import argparse
import json
import logging
from pathlib import Path
from typing import Iterable, List

from sqlalchemy.orm import Session

from coopboard.database import SessionLocal, engine
from coopboard.models import Base
from coopboard.models.family import Family
from coopboard.repositories.family_repository import FamilyRepository
from coopboard.services.auth_service import AuthService

logger = logging.getLogger(__name__)


def seed_families(db: Session, entries: Iterable[dict]) -> List[Family]:
    """
    Create the families that do not exist yet.

    Usernames are stored lower-case. Existing families, and repeats of a
    name earlier in the same batch, are left untouched.

    Returns:
        The families that were created
    """
    repo = FamilyRepository(db)
    created = []
    seen = set()
    for entry in entries:
        username = AuthService.normalize_username(entry["username"])
        if not username:
            raise ValueError("Family entries need a non-blank username")
        if username in seen or repo.username_exists(username):
            logger.info("Family %s already exists, skipping", username)
            continue
        seen.add(username)

        family = Family(
            username=username,
            display_name=entry.get("display_name") or entry["username"],
            is_admin=bool(entry.get("is_admin", False)),
        )
        db.add(family)
        created.append(family)

    db.commit()
    for family in created:
        db.refresh(family)
    logger.info("Seeded %d families", len(created))
    return created


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Load family accounts from JSON.")
    parser.add_argument("path", type=Path, help="JSON file with a list of families")
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create missing tables before loading.",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)

    if not args.path.exists():
        parser.error(f"{args.path} not found")
    with open(args.path) as f:
        entries = json.load(f)

    if args.create_tables:
        Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        seed_families(db, entries)
    finally:
        db.close()


if __name__ == "__main__":
    main()
