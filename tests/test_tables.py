"""Tests for tilecalc tables module."""

import pandas as pd
import pytest

from tilecalc.tables import (
    create_results_dataframe,
    create_summary_table,
    export_to_excel,
    run_batch,
)


def test_create_results_dataframe_empty():
    """Test creating DataFrame from empty results."""
    df = create_results_dataframe([])
    assert df.empty


def test_create_results_dataframe_with_data():
    results = [
        {"Ma": 23.9, "result": "Pass"},
        {"Ma": 40.1, "result": "Fail"},
    ]

    df = create_results_dataframe(results)
    assert len(df) == 2
    assert "Ma" in df.columns
    assert df["Ma"].iloc[0] == 23.9


def test_create_summary_table_empty():
    """Test creating summary from empty DataFrame."""
    summary = create_summary_table(pd.DataFrame())
    assert summary.empty


def test_create_summary_table_with_data():
    df = create_results_dataframe(
        [
            {"Ma": 23.9, "result": "Pass"},
            {"Ma": 40.1, "result": "Fail"},
            {"Ma": 12.0, "result": "Pass"},
        ]
    )
    summary = create_summary_table(df).set_index("metric")["value"]

    assert summary["count"] == 3
    assert summary["max_Ma"] == 40.1
    assert summary["pass_count"] == 2
    assert summary["fail_count"] == 1


def test_run_batch_mixed_rows(sample_input):
    inputs = pd.DataFrame(
        [
            {**sample_input, "provided_resistance_mf": None},
            {**sample_input, "provided_resistance_mf": 27.8},
            {**sample_input, "exposure": "B"},
        ]
    )

    results = run_batch(inputs)

    assert len(results) == 3
    assert results["Ma"].iloc[0] == pytest.approx(23.92, abs=0.01)
    assert pd.isna(results["result"].iloc[0])
    assert results["result"].iloc[1] == "Pass"
    assert "exposure" in results["error"].iloc[2]


def test_run_batch_overrides_need_advanced(sample_input):
    inputs = pd.DataFrame([{**sample_input, "gcp": -1.0}])

    assert run_batch(inputs)["GCp"].iloc[0] == -2.0
    assert run_batch(inputs, advanced=True)["GCp"].iloc[0] == -1.0


def test_export_to_excel_round_trip(tmp_path, sample_input):
    results = run_batch(pd.DataFrame([{**sample_input, "provided_resistance_mf": 27.8}]))
    path = tmp_path / "results.xlsx"

    export_to_excel(results, str(path))
    loaded = pd.read_excel(path, engine="openpyxl")

    assert list(loaded.columns) == list(results.columns)
    assert loaded["Ma"].iloc[0] == pytest.approx(results["Ma"].iloc[0])
    assert loaded["result"].iloc[0] == "Pass"
