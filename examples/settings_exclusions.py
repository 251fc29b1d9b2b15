#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from sonarqube.web import SonarQubeClient, SonarQubeError


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Show or replace a project's source exclusions")
    p.add_argument("project", help="Project key")
    p.add_argument("patterns", nargs="*", help="New exclusion patterns; omit to only show")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    async with SonarQubeClient.from_env() as client:
        try:
            if args.patterns:
                builder = client.settings.set().key("sonar.exclusions").component(args.project)
                for pattern in args.patterns:
                    builder.add_value(pattern)
                await builder.execute()

            query = client.settings.values().keys(["sonar.exclusions"]).component(args.project)
            values = await query.execute()
        except SonarQubeError as e:
            print(f"{e.code}: {e}")
            return

    for setting in values.settings:
        print(f"{setting.key} (inherited={setting.inherited})")
        for value in setting.values or []:
            print(f"  - {value}")


if __name__ == "__main__":
    asyncio.run(main())
