"""Holiday calendar service: holiday normalization, calendar grids and week density."""

__version__ = "1.0.0"
