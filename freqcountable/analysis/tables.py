"""Tabulate counting results for several documents using pandas.

metrics_table() and frequency_table() return DataFrames; the render_*
functions turn them into markdown strings for terminal or report output.
"""

import logging
from pathlib import Path
from typing import Any, Iterable, Mapping, Union

import pandas as pd

from freqcountable.counting.frequency import compute_frequencies
from freqcountable.counting.metrics import compute_metrics
from freqcountable.counting.options import CountOptions, resolve_configuration
from freqcountable.sources.base_source import TextSource

logger = logging.getLogger(__name__)

METRIC_COLUMNS = ["paragraphs", "sentences", "words", "characters", "all"]
FREQUENCY_COLUMNS = ["rank", "word", "count"]

Options = Union[Mapping[str, Any], CountOptions, None]


def metrics_table(
    documents: Iterable[tuple[str, Union[TextSource, str]]],
    options: Options = None,
) -> pd.DataFrame:
    """
    Count every document and return one row per document.

    Args:
        documents: (name, text or TextSource) pairs.
        options: Counting option overrides applied to every document.

    Returns:
        DataFrame with a ``name`` column followed by the metric columns.
    """
    resolved = resolve_configuration(options)
    rows = []
    for name, source in documents:
        result = compute_metrics(source, resolved)
        rows.append({"name": name, **result.to_dict()})

    logger.info("Counted %d document(s)", len(rows))
    return pd.DataFrame(rows, columns=["name"] + METRIC_COLUMNS)


def frequency_table(
    source: Union[TextSource, str],
    options: Options = None,
) -> pd.DataFrame:
    """Top words of ``source`` as a ranked DataFrame; empty when there are no words."""
    ranked = compute_frequencies(source, options)
    if not ranked:
        return pd.DataFrame(columns=FREQUENCY_COLUMNS)

    return pd.DataFrame(
        [
            {"rank": rank, "word": word, "count": count}
            for rank, (word, count) in enumerate(ranked.items(), 1)
        ],
        columns=FREQUENCY_COLUMNS,
    )


def render_metrics_markdown(df: pd.DataFrame) -> str:
    """Markdown table of per-document metrics followed by a totals row."""
    lines = ["### Text Statistics\n"]

    if df.empty:
        lines.append("*No documents counted.*\n")
        return "\n".join(lines)

    lines.append("| Document | Paragraphs | Sentences | Words | Characters | All |")
    lines.append("|---|---|---|---|---|---|")

    for _, row in df.iterrows():
        lines.append(
            f"| {row['name']} | {row['paragraphs']} | {row['sentences']} | "
            f"{row['words']} | {row['characters']} | {row['all']} |"
        )

    if len(df) > 1:
        totals = df[METRIC_COLUMNS].sum()
        lines.append(
            f"| **Total** | {totals['paragraphs']} | {totals['sentences']} | "
            f"{totals['words']} | {totals['characters']} | {totals['all']} |"
        )

    lines.append("")
    return "\n".join(lines)


def render_frequency_markdown(name: str, df: pd.DataFrame) -> str:
    """Markdown table of the ranked words of one document."""
    lines = [f"### Top Words: {name}\n"]

    if df.empty:
        lines.append("*No words found.*\n")
        return "\n".join(lines)

    lines.append("| Rank | Word | Count |")
    lines.append("|---|---|---|")
    for _, row in df.iterrows():
        lines.append(f"| {row['rank']} | {row['word']} | {row['count']} |")

    lines.append("")
    return "\n".join(lines)


def save_table(df: pd.DataFrame, output_path: Union[str, Path]) -> Path:
    """Save a table as JSON (``.json`` suffix) or CSV (anything else)."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    if path.suffix.lower() == ".json":
        df.to_json(path, orient="records", force_ascii=False, indent=2)
    else:
        df.to_csv(path, index=False, encoding="utf-8")

    logger.info("Saved %d rows to %s", len(df), path)
    return path
