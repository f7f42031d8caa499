"""File-backed point, line, polygon and tag feature tables with GeoJSON export."""

__version__ = "0.1.0"
__all__ = ["records", "archive", "styles", "geojson", "featureset"]