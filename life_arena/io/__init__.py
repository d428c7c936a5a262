"""I/O layer: Parquet schemas, output paths, and export snapshots."""
