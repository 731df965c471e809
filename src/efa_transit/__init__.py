"""Transit queries against the South Tyrol EFA journey planner."""

__version__ = "0.1.0"
