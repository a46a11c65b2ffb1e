"""CLI module for ocsf-to-proto."""

from ocsf_to_proto.cli.error_formatter import ReportFormatter, ReportTable
from ocsf_to_proto.cli_main import app

__all__ = [
    "app",
    "ReportFormatter",
    "ReportTable",
]
