#!/usr/bin/env python3
"""Optimize the latest article in the content store.

Usage:
    python optimize.py                         # Rewrite and publish the latest article
    python optimize.py --dry-run               # Everything except the content store write
    python optimize.py --model claude-opus-4-6 --model claude-haiku-4-5-20251001
                                               # Override the ordered model list
    python optimize.py --output-dir /tmp/out   # Where the rewritten markdown is saved
    python optimize.py --no-save               # Don't keep a local copy
"""

import argparse
import dataclasses
import sys
from pathlib import Path

from article_optimizer.config import Settings
from article_optimizer.models import RunSummary
from article_optimizer.pipeline import ArticleOptimizer


def print_summary(summary: RunSummary):
    print(f"\n{'='*60}")
    print("SUMMARY")
    print(f"{'='*60}")
    print(f"  Original article: {summary.original_title}")
    print(f"  Updated article:  {summary.new_title}")
    print(f"  Reference articles analyzed: {len(summary.references)}")
    for ref in summary.references:
        print(f"    - {ref.title} ({ref.url})")
    print(f"  Model used: {summary.model_used}")
    print(f"  Content length: {summary.content_length} characters")
    print(f"  Fields sent: {', '.join(summary.payload_keys)}")
    if summary.saved_path:
        print(f"  Saved to: {summary.saved_path}")
    print(f"  Published: {'yes' if summary.published else 'no (dry run)'}")


def build_settings(args: argparse.Namespace) -> Settings:
    """Apply command-line overrides on top of the .env-backed defaults."""
    settings = Settings()
    overrides = {}
    if args.model:
        overrides["rewrite_models"] = tuple(args.model)
    if args.output_dir:
        overrides["output_dir"] = Path(args.output_dir)
    if args.show_browser:
        overrides["browser_headless"] = False
    return dataclasses.replace(settings, **overrides)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Rewrite the latest article in the style of top-ranking competitors")
    parser.add_argument("--dry-run", action="store_true", help="Don't write to the content store")
    parser.add_argument("--model", action="append", default=[],
                        help="Model identifier to try (repeat to set the fallback order)")
    parser.add_argument("--output-dir", type=str, default="", help="Directory for the rewritten markdown")
    parser.add_argument("--no-save", action="store_true", help="Don't save the rewritten article locally")
    parser.add_argument("--show-browser", action="store_true",
                        help="Run the fallback search browser with a visible window")
    args = parser.parse_args(argv)

    print(f"{'='*60}")
    print("Starting article optimization")
    print(f"{'='*60}")

    try:
        optimizer = ArticleOptimizer(build_settings(args))
        summary = optimizer.run(dry_run=args.dry_run, save=not args.no_save)
    except Exception as e:
        print(f"\nProcess failed: {type(e).__name__}: {e}")
        return 1

    print_summary(summary)
    print("\nProcess completed successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
