"""Command-line entry point for Team Radar.

Usage:
    python -m src.main rank --viewer alice --source file --file config/profiles.yaml
    python -m src.main rank --viewer <profile-id> --source db --top 10 --breakdown
    python -m src.main init-db
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from config.settings import settings
from src.logging_config import setup_logging
from src.matching.ranker import CandidateFilters, CandidateRanker, RankedCandidate
from src.profiles.exceptions import ProfileError
from src.profiles.loader import load_profile_directory

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="team-radar",
        description="Rank potential teammates by compatibility.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    rank = subparsers.add_parser("rank", help="Rank candidates for a student")
    rank.add_argument("--viewer", required=True, help="Profile ID of the browsing student")
    rank.add_argument(
        "--source",
        choices=["file", "db"],
        default="file",
        help="Where to read profiles from (default: file)",
    )
    rank.add_argument("--file", type=Path, help="Profiles YAML file (with --source file)")
    rank.add_argument("--top", type=int, default=settings.top_n, help="How many candidates to show")
    rank.add_argument(
        "--min-score",
        type=int,
        default=settings.min_score,
        help="Hide candidates below this total score",
    )
    rank.add_argument("--breakdown", action="store_true", help="Show per-factor sub-scores")

    filters = rank.add_argument_group("filters")
    filters.add_argument("--search", default="", help="Match name or major")
    filters.add_argument("--skill", action="append", default=[], help="Skill ID (repeatable)")
    filters.add_argument("--day", action="append", default=[], help="Day, e.g. Mon (repeatable)")
    filters.add_argument(
        "--interest", action="append", default=[], help="Project interest (repeatable)"
    )
    filters.add_argument("--team-size", type=int, help="Preferred team size")
    filters.add_argument("--status", help="Profile status (looking, open_to_offers)")

    subparsers.add_parser("init-db", help="Create database tables")

    return parser


def format_candidate(position: int, ranked: RankedCandidate, breakdown: bool = False) -> str:
    """Render one ranked candidate as a line of text."""
    profile = ranked.profile
    mutual = " *mutual*" if ranked.mutual_interest else ""
    line = (
        f"{position:>3}. {ranked.score:>3}% [{ranked.label}] "
        f"{profile.name} ({profile.major}) id={profile.id}{mutual}"
    )
    if breakdown:
        b = ranked.compatibility.breakdown
        line += (
            f"\n       skills={b.skill_complementarity} availability={b.availability_overlap}"
            f" interests={b.project_interest_alignment} team_size={b.team_size_compatibility}"
            f" diversity={b.skill_diversity_bonus} mutual={b.mutual_interest_boost}"
        )
    return line


def _filters_from_args(args: argparse.Namespace) -> CandidateFilters:
    return CandidateFilters(
        search=args.search,
        skill_ids=args.skill,
        days=args.day,
        project_interests=args.interest,
        team_size=args.team_size,
        status=args.status,
    )


def cmd_rank(args: argparse.Namespace) -> int:
    ranker = CandidateRanker(min_score=args.min_score)
    filters = _filters_from_args(args)

    if args.source == "db":
        from src.persistence.database import get_session
        from src.persistence.profile_store import ProfileStore

        with get_session() as session:
            ranked = ranker.rank_for(ProfileStore(session), args.viewer, filters)
    else:
        directory = load_profile_directory(args.file or settings.profiles_path)
        ranked = ranker.rank_for(directory, args.viewer, filters)

    top = ranker.get_top(ranked, args.top)
    if not top:
        print("No matching candidates.")
        return 0

    for position, candidate in enumerate(top, start=1):
        print(format_candidate(position, candidate, args.breakdown))
    return 0


def cmd_init_db(args: argparse.Namespace) -> int:
    from src.persistence.database import init_db

    init_db()
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(settings.log_level, settings.log_file)

    handlers = {"rank": cmd_rank, "init-db": cmd_init_db}
    try:
        return handlers[args.command](args)
    except ProfileError as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
