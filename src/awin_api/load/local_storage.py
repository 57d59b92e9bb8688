"""
Local Storage - Load Layer

Pure functions for local file storage operations.
"""

import polars as pl
import json
import os
import logging

logger = logging.getLogger(__name__)


def _ensure_parent_dir(filepath: str) -> None:
    directory = os.path.dirname(filepath)
    if directory:
        os.makedirs(directory, exist_ok=True)


def save_parquet(df: pl.DataFrame, filepath: str) -> str:
    """
    Save DataFrame to Parquet file

    Args:
        df: DataFrame to save
        filepath: Path to save file

    Returns:
        str: Path to saved file
    """
    logger.info(f"Saving DataFrame to Parquet: {filepath}")
    _ensure_parent_dir(filepath)

    df.write_parquet(filepath)

    logger.info(f"Saved {df.height} records to {filepath}")
    return filepath


def save_json(df: pl.DataFrame, filepath: str) -> str:
    """
    Save DataFrame to JSON file

    Args:
        df: DataFrame to save
        filepath: Path to save file

    Returns:
        str: Path to saved file
    """
    logger.info(f"Saving DataFrame to JSON: {filepath}")
    _ensure_parent_dir(filepath)

    data = df.to_dicts()
    with open(filepath, "w") as f:
        json.dump(data, f, indent=2, default=str)

    logger.info(f"Saved {len(data)} records to {filepath}")
    return filepath


def load_parquet(filepath: str) -> pl.DataFrame:
    """Load DataFrame from Parquet file"""
    logger.info(f"Loading DataFrame from Parquet: {filepath}")
    return pl.read_parquet(filepath)


def save_dataframe(df: pl.DataFrame, filepath: str) -> str:
    """Save as Parquet when the path ends in .parquet, JSON otherwise"""
    if filepath.endswith(".parquet"):
        return save_parquet(df, filepath)
    return save_json(df, filepath)
