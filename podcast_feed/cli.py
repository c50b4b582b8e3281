"""Command-line interface for the podcast feed generator."""

import argparse
import os
import sys

import yaml

from podcast_feed.assets import probe_enclosures
from podcast_feed.config import feed_from_config, read_feed_config, validate_config
from podcast_feed.encoder import write_xml
from podcast_feed.podcast import feed_xml


def main():
    """Entry point for the podcast-feed command."""
    parser = argparse.ArgumentParser(
        description="Generate a podcast RSS feed from a YAML feed definition."
    )

    parser.add_argument(
        "--input-file",
        type=str,
        default="feed_config.yaml",
        help="Input YAML file (default: feed_config.yaml)"
    )
    parser.add_argument(
        "--output-file",
        type=str,
        default="podcast_feed.xml",
        help="Output XML file (default: podcast_feed.xml)"
    )
    parser.add_argument(
        "--skip-asset-verification",
        action="store_true",
        help="Do not send HTTP HEAD requests to fill in missing enclosure sizes"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate the feed definition only, do not write the feed"
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show version information and exit"
    )

    # Parse arguments from the command line
    args = parser.parse_args()

    if args.version:
        from podcast_feed import __version__
        print(f"podcast-feed version {__version__}")
        sys.exit(0)

    # GitHub Actions inputs override the flags
    if os.environ.get("INPUT_SKIP_ASSET_VERIFICATION", "").lower() == "true":
        args.skip_asset_verification = True
    if os.environ.get("INPUT_DRY_RUN", "").lower() == "true":
        args.dry_run = True

    print(f"Input file: {args.input_file}, Output file: {args.output_file}")

    try:
        config = read_feed_config(args.input_file)
    except FileNotFoundError:
        print(f"Error: Config file '{args.input_file}' not found.", file=sys.stderr)
        sys.exit(1)
    except yaml.YAMLError as e:
        print(f"Error: Invalid YAML syntax in '{args.input_file}': {e}", file=sys.stderr)
        sys.exit(1)

    is_valid, errors = validate_config(config)
    if not is_valid:
        print("Error: Config validation failed:", file=sys.stderr)
        for error in errors:
            print(f"  - {error}", file=sys.stderr)
        sys.exit(1)

    print("Config validation passed.")
    if args.dry_run:
        print("Dry-run completed successfully.")
        sys.exit(0)

    try:
        feed = feed_from_config(config)
        if args.skip_asset_verification:
            print("Skipping asset verification.")
        else:
            probe_enclosures(feed)
        write_xml(feed_xml(feed), args.output_file)
        print(f"RSS feed successfully generated at {args.output_file}")
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
