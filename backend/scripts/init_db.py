"""Create (or recreate with --reset) the listing, journal and CMS image tables."""
import argparse
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.config import settings  # noqa: E402
from app.database import engine, Base  # noqa: E402
import app.models  # noqa: E402,F401 - registers all models


def init_db(reset: bool = False):
    if reset:
        print(f"Dropping all tables on {settings.DATABASE_URL} ...")
        Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    print(f"Tables ready: {', '.join(sorted(Base.metadata.tables))}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--reset", action="store_true", help="drop existing tables first")
    args = parser.parse_args()
    init_db(reset=args.reset)
