#!/usr/bin/env python3
"""
Print ranked contractor matches for a job.

Usage:
    python -m main_driver.match <job_id> [--json]
"""

import argparse
import json
import logging
import sys
from dataclasses import asdict

from core.config_loader import get_config
from core.matcher import ContractorMatcher, JobNotFoundError
from database.uow import repositories_uow

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Rank contractors for a job")
    parser.add_argument("job_id", type=int, help="Job to find contractors for")
    parser.add_argument("--json", action="store_true", help="Print matches as JSON")
    args = parser.parse_args(argv)

    config = get_config()

    with repositories_uow() as repos:
        matcher = ContractorMatcher(repos.jobs, repos.contractors, config=config.matching.scorer)
        try:
            matches = matcher.find_matches(args.job_id)
        except JobNotFoundError as e:
            logger.error(str(e))
            return 1

    if args.json:
        print(json.dumps([asdict(m) for m in matches], indent=2))
        return 0

    if not matches:
        print(f"No qualified contractors for job {args.job_id}")
        return 0

    for rank, match in enumerate(matches, start=1):
        print(f"{rank:>2}. [{match.match_score:>3}] {match.contractor_name} "
              f"({match.specialty}, {match.zip_code}, {match.rating})")
        for reason in match.match_reasons:
            print(f"       - {reason}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
