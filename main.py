"""
Entry point for the SPIP to Jekyll import tool.
"""

import argparse
import sys

from spip_to_jekyll.migration_tool import SpipImportTool

CONFIG_FILE = "config/import_config.json"

_BOOLEAN_OPTIONS = {
    "clean_entities": "convert non-ASCII characters to HTML entities in titles, keywords and comments",
    "comments": "import published forum messages into the front matter",
    "categories": "save the article's categories in its front matter",
    "tags": "save the article's tags in its front matter",
    "more_excerpt": "use the content before <!-- more --> as excerpt when there is none",
    "more_anchor": "turn <!-- more --> into 'more' and 'more-<id>' anchors",
}


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Import a SPIP site into a Jekyll source tree.")
    parser.add_argument("--config", default=CONFIG_FILE, help=f"JSON config file (default: {CONFIG_FILE})")
    parser.add_argument("--dbname", help="Database name (default: '')")
    parser.add_argument("--socket", help="Database socket (default: '')")
    parser.add_argument("--user", help="Database user name (default: '')")
    parser.add_argument("--password", help="Database user's password (default: '')")
    parser.add_argument("--host", help="Database host name (default: 'localhost')")
    parser.add_argument("--port", help="Database port number (default: '3306')")
    parser.add_argument("--table_prefix", help="Table prefix name (default: 'spip_')")
    parser.add_argument("--site_prefix", help="Site prefix name (default: '')")
    parser.add_argument("--extension", help="Extension of imported posts (default: 'html')")
    parser.add_argument(
        "--status",
        help="Comma separated list of allowed statuses (default: 'publish', "
        "other options: 'draft', 'private', 'revision')",
    )
    parser.add_argument("--output_dir", help="Root of the Jekyll site (default: '.')")
    parser.add_argument("--tag_types", help="Comma separated keyword groups imported as tags")
    parser.add_argument("--page_categories", help="Comma separated rubrique ids imported as pages")
    for name, text in _BOOLEAN_OPTIONS.items():
        parser.add_argument(
            f"--{name}", action=argparse.BooleanOptionalAction, default=None, help=f"Whether to {text} (default: true)"
        )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """
    Main function to run the SPIP to Jekyll import tool.
    """
    args = parse_args(argv)
    flags = {k: v for k, v in vars(args).items() if k != "config" and v is not None}

    tool = SpipImportTool(config_file=args.config, overrides=flags)
    tool.log_message("Starting SPIP to Jekyll import.")

    try:
        tool.run()
    except Exception as e:
        tool.log_message(f"Import aborted: {e}", level="ERROR")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
