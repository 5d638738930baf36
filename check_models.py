#!/usr/bin/env python3
"""Check the Anthropic API key and which configured rewrite models answer.

Usage:
    python check_models.py            # List models available to this key
    python check_models.py --probe    # Also send a tiny prompt to each configured model
"""

import argparse
import sys

import anthropic

from article_optimizer.config import Settings


def list_models(client: anthropic.Anthropic) -> list[str]:
    """Return the model ids the API reports for this key."""
    print("  -> Fetching available models...")
    models = [m.id for m in client.models.list(limit=100)]
    print(f"  OK Found {len(models)} models:")
    for model_id in models:
        print(f"     - {model_id}")
    return models


def probe_model(client: anthropic.Anthropic, model: str) -> bool:
    """Send a one-line prompt to `model`; True if it answers with any text."""
    try:
        message = client.messages.create(
            model=model,
            max_tokens=16,
            messages=[{"role": "user", "content": "Reply with the single word OK."}],
        )
    except anthropic.APIError as e:
        print(f"  FAILED {model}: {e}")
        return False

    text = "".join(b.text for b in message.content if b.type == "text").strip()
    print(f"  OK {model}: {text[:40]!r}")
    return bool(text)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Check Anthropic API access for the rewrite models")
    parser.add_argument("--probe", action="store_true", help="Send a test prompt to each configured model")
    args = parser.parse_args(argv)

    settings = Settings()
    key = settings.anthropic_api_key
    if not key:
        print("Error: ANTHROPIC_API_KEY not set in .env")
        return 1
    print(f"API key found: {key[:10]}...{key[-4:]}")

    client = anthropic.Anthropic(api_key=key)
    try:
        available = list_models(client)
    except anthropic.APIError as e:
        print(f"Error listing models: {e}")
        return 1

    configured = list(settings.rewrite_models)
    missing = [m for m in configured if m not in available]
    print(f"\nConfigured rewrite order: {', '.join(configured)}")
    if missing:
        print(f"  WARNING: not listed for this key: {', '.join(missing)}")

    if not args.probe:
        return 0

    print()
    working = [m for m in configured if probe_model(client, m)]
    print(f"\n{len(working)}/{len(configured)} configured models answered")
    return 0 if working else 1


if __name__ == "__main__":
    sys.exit(main())
