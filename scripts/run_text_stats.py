"""
Count text statistics and word frequencies for one or more files.

Prints a markdown table of paragraph/sentence/word/character counts for all
files, followed by the most frequent words of each file.

Usage:
    python -m scripts.run_text_stats FILE [FILE ...] [--top 5]
        [--hard-returns] [--strip-tags] [--ignore-returns] [--keep-zero-width]
        [--output output/stats.csv] [--config config/config.yaml]

Use "-" as a file name to read from stdin.
"""

import argparse
import logging
import sys
from pathlib import Path

import yaml

# Ensure project root is on sys.path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from freqcountable.analysis.tables import (
    frequency_table,
    metrics_table,
    render_frequency_markdown,
    render_metrics_markdown,
    save_table,
)
from freqcountable.config_loader import load_config
from freqcountable.counting.options import resolve_configuration
from freqcountable.sources.memory_source import StaticTextSource

logger = logging.getLogger(__name__)


def setup_logging(config: dict) -> None:
    """Configure logging based on config settings."""
    log_cfg = config.get("logging", {})
    log_format = log_cfg.get(
        "format", "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )
    log_level = log_cfg.get("level", "INFO")

    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format=log_format,
    )

    logs_dir = config.get("paths", {}).get("logs_dir")
    if logs_dir:
        logs_path = Path(logs_dir)
        logs_path.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(
            logs_path / "text_stats.log", encoding="utf-8"
        )
        file_level = log_cfg.get("file_level", "DEBUG")
        file_handler.setLevel(getattr(logging, file_level, logging.DEBUG))
        file_handler.setFormatter(logging.Formatter(log_format))
        logging.getLogger().addHandler(file_handler)


def build_overrides(config: dict, args: argparse.Namespace) -> dict:
    """Counting overrides from the config file, with command-line flags on top."""
    overrides = dict(config.get("counting") or {})
    if args.top is not None:
        overrides["freq_item_count"] = args.top
    if args.hard_returns:
        overrides["hard_returns"] = True
    if args.strip_tags:
        overrides["strip_tags"] = True
    if args.ignore_returns:
        overrides["ignore_returns"] = True
    if args.keep_zero_width:
        overrides["ignore_zero_width"] = False
    return overrides


def read_sources(paths: list[str]) -> list[tuple[str, StaticTextSource]]:
    """Read each file into a StaticTextSource, skipping unreadable ones."""
    documents = []
    for name in paths:
        if name == "-":
            documents.append((name, StaticTextSource(sys.stdin.read(), name="stdin")))
            continue
        try:
            text = Path(name).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Could not read %s: %s", name, e)
            continue
        documents.append((name, StaticTextSource(text, name=name)))
    return documents


def main(argv: list[str] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Count paragraphs, sentences, words, characters and top words.",
    )
    parser.add_argument("files", nargs="+", help="Text files to count ('-' for stdin)")
    parser.add_argument(
        "--top", type=int, default=None,
        help="Number of most frequent words to show (default from config: 10)",
    )
    parser.add_argument("--hard-returns", action="store_true",
                        help="Separate paragraphs by blank lines only")
    parser.add_argument("--strip-tags", action="store_true",
                        help="Strip HTML tags before counting")
    parser.add_argument("--ignore-returns", action="store_true",
                        help="Leave newlines out of the 'all' count")
    parser.add_argument("--keep-zero-width", action="store_true",
                        help="Count zero-width space characters")
    parser.add_argument("--output", default=None,
                        help="Save the metrics table (.csv or .json)")
    parser.add_argument("--config", default=None, help="Path to config.yaml")
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except (OSError, yaml.YAMLError) as e:
        logging.basicConfig(level=logging.INFO)
        logger.error("Could not load config: %s", e)
        return 1
    setup_logging(config)

    options = resolve_configuration(build_overrides(config, args))
    logger.debug("Counting with %s", options)

    documents = read_sources(args.files)
    if not documents:
        logger.error("No readable input files")
        return 1

    df = metrics_table(documents, options)
    print(render_metrics_markdown(df))

    for name, source in documents:
        print(render_frequency_markdown(name, frequency_table(source, options)))

    if args.output:
        save_table(df, args.output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
