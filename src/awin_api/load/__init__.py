"""
Load Layer - Data Persistence

Local file storage (Parquet, JSON) for exported records.
"""
