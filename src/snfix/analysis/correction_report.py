"""Tabular reporting of corrections for the check and report commands.

This module turns AnalysisResult objects into pandas DataFrames and Rich
tables, separating presentation logic from command orchestration.
"""

import logging
from pathlib import Path

import pandas as pd
from rich.console import Console
from rich.table import Table
from tqdm import tqdm

from snfix.analysis.code_corrector import CodeCorrector
from snfix.analysis.match_types import AnalysisResult, ConfidenceTier

logger = logging.getLogger(__name__)

REPORT_COLUMNS = [
    "file",
    "line",
    "column",
    "kind",
    "context",
    "original",
    "corrected",
    "confidence",
    "distance",
    "similarity",
    "applied",
]

TIER_STYLES = {
    ConfidenceTier.HIGH.value: "green",
    ConfidenceTier.MEDIUM.value: "yellow",
    ConfidenceTier.LOW.value: "magenta",
}


def analysis_to_dataframe(source: str, analysis: AnalysisResult, file: str = "") -> pd.DataFrame:
    """Convert corrections and suggestions into one row each, in text order.

    Args:
        source: Text the analysis ran on (for line/column numbers)
        analysis: Result of CodeCorrector.analyze_code
        file: File label for the 'file' column

    Returns:
        DataFrame with REPORT_COLUMNS
    """
    rows = []
    for applied, items in ((True, analysis.corrections), (False, analysis.suggestions)):
        for correction in items:
            rows.append(
                {
                    "file": file,
                    "line": correction.line(source),
                    "column": correction.column(source),
                    "kind": correction.kind.value,
                    "context": correction.context,
                    "original": correction.original,
                    "corrected": correction.corrected,
                    "confidence": correction.confidence.value,
                    "distance": correction.distance,
                    "similarity": round(correction.similarity, 3),
                    "applied": applied,
                }
            )

    df = pd.DataFrame(rows, columns=REPORT_COLUMNS)
    return df.sort_values(by=["line", "column"]).reset_index(drop=True)


def scan_files(
    paths: list[Path], corrector: CodeCorrector, root: Path | None = None
) -> pd.DataFrame:
    """Analyze every file and collect all corrections into one DataFrame.

    Files that cannot be decoded as UTF-8 are skipped with a warning.

    Args:
        paths: Script files to analyze
        corrector: CodeCorrector to use
        root: If given, file labels are made relative to it

    Returns:
        DataFrame with REPORT_COLUMNS
    """
    frames = []
    for path in tqdm(paths, desc="Scanning scripts"):
        try:
            source = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            logger.warning(f"Skipping {path}: not valid UTF-8 ({e})")
            continue

        label = str(path.relative_to(root)) if root is not None else str(path)
        frames.append(analysis_to_dataframe(source, corrector.analyze_code(source), file=label))

    frames = [frame for frame in frames if not frame.empty]
    if not frames:
        return pd.DataFrame(columns=REPORT_COLUMNS)
    return pd.concat(frames, ignore_index=True)


def summarize_by_tier(df: pd.DataFrame) -> pd.DataFrame:
    """Count corrections per confidence tier.

    Returns:
        DataFrame indexed by tier (high, medium, low) with columns
        'count' and 'files' (number of distinct files affected).
    """
    tiers = [ConfidenceTier.HIGH.value, ConfidenceTier.MEDIUM.value, ConfidenceTier.LOW.value]
    if df.empty:
        return pd.DataFrame({"count": 0, "files": 0}, index=pd.Index(tiers, name="confidence"))

    grouped = df.groupby("confidence").agg(count=("original", "size"), files=("file", "nunique"))
    return grouped.reindex(tiers, fill_value=0).rename_axis("confidence")


def display_corrections_table(df: pd.DataFrame, console: Console, title: str) -> None:
    """Display corrections as a Rich table.

    Args:
        df: DataFrame from analysis_to_dataframe or scan_files
        console: Rich console for output
        title: Table title
    """
    table = Table(title=title)
    table.add_column("Line", style="cyan", justify="right")
    table.add_column("Col", style="cyan", justify="right")
    table.add_column("Kind")
    table.add_column("Context", style="dim")
    table.add_column("Original", style="red", no_wrap=True)
    table.add_column("Corrected", style="green", no_wrap=True)
    table.add_column("Confidence")
    table.add_column("Similarity", justify="right")
    table.add_column("Applied")

    for row in df.itertuples():
        style = TIER_STYLES.get(row.confidence, "white")
        table.add_row(
            str(row.line),
            str(row.column),
            row.kind,
            row.context if isinstance(row.context, str) else "-",
            row.original,
            row.corrected,
            f"[{style}]{row.confidence}[/{style}]",
            f"{row.similarity:.3f}",
            "yes" if row.applied else "no",
        )

    console.print(table)


def display_tier_summary(summary: pd.DataFrame, console: Console) -> None:
    table = Table(title="Corrections by Confidence")
    table.add_column("Confidence", style="cyan")
    table.add_column("Count", style="green", justify="right")
    table.add_column("Files", style="green", justify="right")

    for tier, row in summary.iterrows():
        table.add_row(str(tier), str(int(row["count"])), str(int(row["files"])))

    console.print(table)
