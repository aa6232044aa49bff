"""Output formatting services."""

from .routing_formatter import build_maps_url, format_summary, result_to_csv, result_to_json

__all__ = ["build_maps_url", "format_summary", "result_to_csv", "result_to_json"]
