"""Capital Compass: company batch scoring, theme trends and investor rollups."""

__version__ = "1.0.0"
