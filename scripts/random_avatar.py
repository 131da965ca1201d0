#!/usr/bin/env python3
"""
Print preview urls of random avatars from the catalog.

Usage:
    python scripts/random_avatar.py --catalog-dir data/catalog --count 3
    python scripts/random_avatar.py --gender female --style bitmoji --seed 7
    python scripts/random_avatar.py --filters my_filters.json --allowlist
"""

import argparse
import json
import os
import random
import sys

sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "src"))

from config.constants import GENDERS, POSES, STYLES
from core.logging import configure_logging, get_logger
from bitmoji import CatalogError, load_catalog
from bitmoji.avatar import random_preview_url

logger = get_logger("random_avatar")


def main():
    parser = argparse.ArgumentParser(description="Print random avatar preview urls")
    parser.add_argument("--catalog-dir", default=None,
                        help="Catalog directory holding assets.json and templates.json. "
                             "Required unless CATALOG_DIR is set; no catalog ships with the package")
    parser.add_argument("--gender", choices=[name for name, _ in GENDERS], default=None,
                        help="Gender (default: random)")
    parser.add_argument("--style", choices=[name for name, _ in STYLES], default=None,
                        help="Style (default: random)")
    parser.add_argument("--pose", choices=list(POSES), default="fashion", help="Pose (default: fashion)")
    parser.add_argument("--filters", default=None, help="JSON file with a brand filter config")
    parser.add_argument("--allowlist", action="store_true",
                        help="Keep only outfits matching the filters instead of dropping them")
    parser.add_argument("--count", type=int, default=1, help="Number of urls (default: 1)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    args = parser.parse_args()

    configure_logging()
    rng = random.Random(args.seed)

    filters = None
    if args.filters:
        with open(args.filters, "r", encoding="utf-8") as f:
            filters = json.load(f)

    try:
        catalog = load_catalog(args.catalog_dir)
    except CatalogError as e:
        logger.error("Could not load catalog", error=str(e))
        sys.exit(1)

    genders = dict(GENDERS)
    styles = dict(STYLES)
    for _ in range(args.count):
        gender = genders[args.gender] if args.gender else rng.choice(GENDERS)[1]
        style = styles[args.style] if args.style else rng.choice(STYLES)[1]
        print(random_preview_url(
            catalog,
            gender,
            style,
            pose=args.pose,
            filters=filters,
            return_filtered_fields=args.allowlist,
            rng=rng,
        ))


if __name__ == "__main__":
    main()
