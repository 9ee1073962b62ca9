"""Pandas-based batch tables for tilecalc."""

from typing import Any

import pandas as pd

from tilecalc.engine import compute_uplift_moment
from tilecalc.schemas import Verdict
from tilecalc.validation import ValidationError


def create_results_dataframe(results: list[dict[str, Any]]) -> pd.DataFrame:
    """
    Create a pandas DataFrame from calculation result records.

    Args:
        results: List of flat result records (see ``CalculationResult.to_record``)

    Returns:
        DataFrame with calculation results
    """
    if not results:
        return pd.DataFrame()

    df = pd.DataFrame(results)
    return df


def create_summary_table(df: pd.DataFrame) -> pd.DataFrame:
    """
    Create a summary table from results DataFrame.

    Args:
        df: DataFrame with calculation results

    Returns:
        Summary DataFrame with row count, maximum Ma and verdict counts
    """
    if df.empty:
        return pd.DataFrame()

    verdicts = df["result"] if "result" in df.columns else pd.Series(dtype=object)
    summary = pd.DataFrame(
        {
            "metric": ["count", "max_Ma", "pass_count", "fail_count"],
            "value": pd.Series(
                [
                    len(df),
                    df["Ma"].max() if "Ma" in df.columns else 0,
                    int((verdicts == Verdict.PASS.value).sum()),
                    int((verdicts == Verdict.FAIL.value).sum()),
                ],
                dtype=object,
            ),
        }
    )
    return summary


def run_batch(inputs: pd.DataFrame, advanced: bool = False) -> pd.DataFrame:
    """
    Compute every row of an input table.

    Rows that fail validation keep their inputs and carry the message in an
    ``error`` column instead of results.

    Args:
        inputs: One calculation per row, columns named as the input fields
        advanced: Honour ``gcp``/``kd`` override columns

    Returns:
        Input columns joined with the result columns
    """
    rows = []
    for record in inputs.to_dict(orient="records"):
        # Empty CSV cells arrive as NaN
        cleaned = {key: (None if pd.isna(value) else value) for key, value in record.items()}
        try:
            result = compute_uplift_moment(cleaned, advanced=advanced)
        except ValidationError as e:
            rows.append({**record, "error": str(e)})
        else:
            rows.append({**record, **result.to_record()})
    return create_results_dataframe(rows)


def export_to_csv(df: pd.DataFrame, filepath: str) -> None:
    """
    Export DataFrame to CSV file.

    Args:
        df: DataFrame to export
        filepath: Path to save CSV file
    """
    df.to_csv(filepath, index=False)


def export_to_excel(df: pd.DataFrame, filepath: str) -> None:
    """
    Export DataFrame to Excel file.

    Args:
        df: DataFrame to export
        filepath: Path to save Excel file
    """
    df.to_excel(filepath, index=False, engine="openpyxl")
