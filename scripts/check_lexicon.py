"""Validate a canvas lexicon JSON file and report its shape."""

from __future__ import annotations

import argparse
import sys
from collections import defaultdict
from pathlib import Path
from typing import Dict, List, Tuple

REPO_ROOT = Path(__file__).resolve().parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from canvas_brain.constants import CATEGORY_ORDER, INTENSITY_RANGE, PARTICLE_RANGE, SPEED_RANGE  # noqa: E402
from canvas_brain.lang.lexicon import LEXICON_JSON_PATH, Lexicon, LexiconError, load_lexicon  # noqa: E402
from canvas_brain.types import MoodPreset  # noqa: E402

MIN_GROUP_SIZE = 4
MAX_GROUP_SIZE = 6


def find_group_size_issues(lexicon: Lexicon) -> List[str]:
    issues: List[str] = []
    for category in CATEGORY_ORDER:
        for index, entry in enumerate(lexicon.entries(category)):
            size = len(entry.keywords)
            if not MIN_GROUP_SIZE <= size <= MAX_GROUP_SIZE:
                issues.append(f"{category}[{index}] ({entry.canonical_key}) has {size} keywords")
    return issues


def find_duplicate_keywords(lexicon: Lexicon) -> List[Tuple[str, str, List[str]]]:
    """Keywords listed in more than one group of the same category."""

    duplicates: List[Tuple[str, str, List[str]]] = []
    for category in CATEGORY_ORDER:
        owners: Dict[str, List[str]] = defaultdict(list)
        for index, entry in enumerate(lexicon.entries(category)):
            for keyword in entry.keywords:
                owners[keyword].append(f"{entry.canonical_key}#{index}")
        for keyword, groups in sorted(owners.items()):
            if len(groups) > 1:
                duplicates.append((category, keyword, groups))
    return duplicates


def find_mood_range_issues(lexicon: Lexicon) -> List[str]:
    issues: List[str] = []
    for entry in lexicon.entries("mood"):
        preset = entry.resolved_value
        if not isinstance(preset, MoodPreset):
            continue
        if not INTENSITY_RANGE[0] <= preset.intensity <= INTENSITY_RANGE[1]:
            issues.append(f"mood {entry.canonical_key}: intensity {preset.intensity} out of range")
        if not SPEED_RANGE[0] <= preset.speed <= SPEED_RANGE[1]:
            issues.append(f"mood {entry.canonical_key}: speed {preset.speed} out of range")
        if not PARTICLE_RANGE[0] <= preset.particle_count <= PARTICLE_RANGE[1]:
            issues.append(
                f"mood {entry.canonical_key}: particle_count {preset.particle_count} out of range"
            )
    return issues


def main() -> int:
    parser = argparse.ArgumentParser(description="Validate a canvas lexicon JSON file")
    parser.add_argument("--lexicon", help="Path to lexicon JSON", default=str(LEXICON_JSON_PATH))
    parser.add_argument("--strict", action="store_true", help="Exit non-zero on warnings")
    args = parser.parse_args()

    try:
        lexicon = load_lexicon(args.lexicon)
    except (FileNotFoundError, LexiconError) as exc:
        print(f"ERROR: {exc}")
        return 2

    print(f"Lexicon path: {args.lexicon}")
    for category in CATEGORY_ORDER:
        entries = lexicon.entries(category)
        keys = sorted({entry.canonical_key for entry in entries})
        print(f"  {category}: {len(entries)} groups -> {', '.join(keys) or '-'}")
    print(f"  substitutions: {len(lexicon.substitutions)}")
    print(f"  gestures: {', '.join(lexicon.gestures) or '-'}")

    warnings = find_group_size_issues(lexicon) + find_mood_range_issues(lexicon)
    for category, keyword, groups in find_duplicate_keywords(lexicon):
        warnings.append(f"{category}: '{keyword}' repeated in {', '.join(groups)}")

    if warnings:
        print("Warnings:")
        for warning in warnings:
            print(f"  {warning}")
        return 1 if args.strict else 0
    print("No issues found.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
