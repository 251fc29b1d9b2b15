#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging
from collections import Counter

from sonarqube.web import SonarQubeClient


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Summarize open issues of a SonarQube project")
    p.add_argument("project", help="Project key")
    p.add_argument("--page-size", type=int, default=100)
    p.add_argument("--limit", type=int, default=None, help="Stop after this many issues")
    p.add_argument("--debug", action="store_true", help="Log every page fetch")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    if args.debug:
        logging.basicConfig(level=logging.DEBUG)

    # SONARQUBE_URL / SONARQUBE_TOKEN
    async with SonarQubeClient.from_env() as client:
        iterator = (
            client.issues.search()
            .projects([args.project])
            .issue_statuses(["OPEN", "CONFIRMED"])
            .page_size(args.page_size)
            .all()
        )
        by_severity: Counter[str] = Counter()
        seen = 0
        async for issue in iterator:
            severity = issue.impacts[0].severity if issue.impacts else "NONE"
            by_severity[severity] += 1
            seen += 1
            if args.limit is not None and seen >= args.limit:
                break

    print("=" * 40)
    print(f"Project    : {args.project}")
    print(f"Issues     : {seen} (server total {iterator.total})")
    print(f"Pages      : {iterator.pages_fetched}")
    print("=" * 40)
    for severity, count in by_severity.most_common():
        print(f"{severity:12} | {count:>6}")


if __name__ == "__main__":
    asyncio.run(main())
