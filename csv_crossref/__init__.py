"""Cross-reference uploaded CSV files against a sheet's key column.

The public entry point is :func:`csv_crossref.services.pipeline.run_update`;
the CLI in :mod:`csv_crossref.cli` wires it to files on disk.
"""

__version__ = "0.1.0"
