"""Building blocks for running Git hooks: filtering, templating, scripts, ordering and hook files."""

__version__ = "0.1.0"