#!/usr/bin/env python3
"""Rank teammates for one student straight from the database.

Usage:
    python -m scripts.rank_candidates <profile-id> [top_n]

Environment variables:
    DATABASE_URL: SQLAlchemy connection string
"""
import logging
import sys

from scripts.bootstrap import settings, get_session, init_db
from src.logging_config import setup_logging
from src.main import format_candidate
from src.matching.ranker import CandidateRanker
from src.persistence.profile_store import ProfileStore
from src.profiles.exceptions import ProfileNotFoundError

logger = logging.getLogger(__name__)


def main() -> int:
    setup_logging(settings.log_level, settings.log_file)

    if len(sys.argv) < 2:
        print(__doc__)
        return 2

    viewer_id = sys.argv[1]
    top_n = int(sys.argv[2]) if len(sys.argv) > 2 else settings.top_n

    init_db()
    ranker = CandidateRanker(min_score=settings.min_score)

    with get_session() as session:
        ranked = ranker.rank_for(ProfileStore(session), viewer_id)

    for position, candidate in enumerate(ranker.get_top(ranked, top_n), start=1):
        print(format_candidate(position, candidate, breakdown=True))
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except ProfileNotFoundError as e:
        logger.error("Error: %s", e)
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Interrupted.")
        sys.exit(1)
