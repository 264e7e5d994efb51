#!/usr/bin/env python3
"""
Generate synthetic ground truth for labeled form regions.

Reads a JSON list of field regions and a JSON page read result (a single
page object, a list of pages, or an analyze result with ``readResults``),
then writes generated annotations, or label records with ``--labels``.
"""

from __future__ import annotations

import argparse
import json
import logging
import random
from dataclasses import replace
from pathlib import Path

from ocr_field_generator import (
    DEFAULT_GENERATOR_CONFIG,
    FieldRegion,
    PageOcr,
    generate_batch,
    propose_tag,
    to_label,
)
from ocr_field_generator.generation import pages_by_number


def load_pages(path: Path) -> list[PageOcr]:
    payload = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(payload, dict):
        analyze = payload.get("analyzeResult", payload)
        payload = analyze.get("readResults", [analyze])
    return [PageOcr.model_validate(page) for page in payload]


def load_regions(path: Path) -> list[FieldRegion]:
    payload = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(payload, dict):
        payload = [payload]
    return [FieldRegion.model_validate(region) for region in payload]


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--regions", required=True, help="Field regions JSON file")
    ap.add_argument("--ocr", required=True, help="Page read result JSON file")
    ap.add_argument("--out", default=None, help="Output file (stdout if omitted)")
    ap.add_argument("--resolution", type=float, default=1.0)
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--no-jitter", action="store_true")
    ap.add_argument(
        "--words",
        action="store_true",
        help="Use dictionary words for alphanumeric string fields",
    )
    ap.add_argument(
        "--propose-tags",
        action="store_true",
        help="Fill untagged regions from the nearest OCR text first",
    )
    ap.add_argument("--labels", action="store_true", help="Emit label records")
    ap.add_argument("--verbose", action="store_true", help="Verbose logging to stderr")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    config = replace(
        DEFAULT_GENERATOR_CONFIG,
        jitter=not args.no_jitter,
        seed=args.seed,
        alphanumeric_strategy="words" if args.words else "pattern",
    )
    pages = load_pages(Path(args.ocr))
    regions = load_regions(Path(args.regions))

    if args.propose_tags:
        pages_by_page = pages_by_number(pages)
        proposed: list[FieldRegion] = []
        for region in regions:
            if region.tag.name:
                proposed.append(region)
                continue
            info = propose_tag(region.bbox, pages_by_page.get(region.page))
            proposed.append(
                region.model_copy(
                    update={"tag": info.tag_proposal, "ocr_line": info.ocr_line}
                )
            )
        regions = proposed

    results = generate_batch(
        regions,
        pages,
        args.resolution,
        config=config,
        rng=random.Random(args.seed),
    )
    if args.labels:
        payload = [to_label(info).model_dump(by_alias=True) for info in results]
    else:
        payload = [info.model_dump(by_alias=True) for info in results]

    text = json.dumps(payload, indent=2)
    if args.out:
        Path(args.out).write_text(text, encoding="utf-8")
        print(f"Wrote {len(results)} generated region(s) to {args.out}")
    else:
        print(text)


if __name__ == "__main__":
    main()
