"""SVG / Android vector drawable to Jetpack Compose ImageVector compiler."""

__version__ = "0.1.0"
