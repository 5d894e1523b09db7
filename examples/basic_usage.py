"""
Basic GradeRace usage example
Summarize one race data page with both model tiers
"""

import asyncio
import sys

from graderace import RaceSummarizer, GradeRaceConfig, GradeRaceError, load_environment


async def main(url: str):
    """Summarize a page with the flash model, then the pro model"""

    load_environment()
    summarizer = RaceSummarizer(GradeRaceConfig.from_env())

    print(f"✓ Using {summarizer.config.provider} "
          f"({summarizer.config.flash_model} / {summarizer.config.pro_model})")
    print()

    for model_name in ("flash", "pro"):
        result = await summarizer.summarize_url(url, model_name)
        print(f"--- {result.model} ---")
        print(result.text)
        print()

    print(summarizer.get_stats())


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python examples/basic_usage.py <url>")
        sys.exit(1)

    try:
        asyncio.run(main(sys.argv[1]))
    except GradeRaceError as e:
        print(f"❌ {e}")
        sys.exit(1)
