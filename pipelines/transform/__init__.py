"""Derived views over cached snapshots."""

from pipelines.transform.jhu_views import add_counts, filter_counties, generalize_locations

__all__ = ["add_counts", "filter_counties", "generalize_locations"]
