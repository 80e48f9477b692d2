"""
Seed roles and permissions. Run once after migrations, from project root:
  python -m petconnect.scripts.seed_roles
Registration fails with IllegalStateError until the OWNER role exists.
"""
import argparse
import logging
import sys

from sqlalchemy.exc import SQLAlchemyError

from petconnect.core.database import SessionLocal
from petconnect.services.role_seed import seed_roles

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main() -> int:
    parser = argparse.ArgumentParser(description="Seed PetConnect roles and permissions.")
    parser.parse_args()

    db = SessionLocal()
    try:
        roles_created, permissions_created = seed_roles(db)
        print(f"Seeded {roles_created} role(s) and {permissions_created} permission(s).")
        return 0
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Role seed failed: %s", e)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
