"""Pin slide: a sliding-tile puzzle with a pin that glides over bridges."""

__version__ = "0.1.0"
