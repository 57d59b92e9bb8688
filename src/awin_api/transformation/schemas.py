"""
Transformation Layer Schemas

Tabular schemas for flattened Awin records.
"""

import polars as pl

# One row per transaction part
TRANSACTION_PARTS_SCHEMA = pl.Schema(
    [
        ("transaction_id", pl.Int64()),
        ("advertiser_id", pl.Int64()),
        ("publisher_id", pl.Int64()),
        ("commission_status", pl.String()),
        ("transaction_date", pl.Datetime()),
        ("validation_date", pl.Datetime()),
        ("sale_amount", pl.Float64()),
        ("commission_amount", pl.Float64()),
        ("currency", pl.String()),
        ("order_ref", pl.String()),
        ("part_commission_group_id", pl.String()),
        ("part_amount", pl.Float64()),
        ("part_commission_amount", pl.Float64()),
        ("commission_group_code", pl.String()),
        ("commission_group_name", pl.String()),
        ("commission_group_type", pl.String()),
        ("commission_group_percentage", pl.Float64()),
    ]
)

COMMISSION_GROUPS_SCHEMA = pl.Schema(
    [
        ("group_id", pl.String()),
        ("advertiser_id", pl.Int64()),
        ("group_code", pl.String()),
        ("group_name", pl.String()),
        ("type", pl.String()),
        ("percentage", pl.Float64()),
        ("amount", pl.Float64()),
        ("currency", pl.String()),
    ]
)
