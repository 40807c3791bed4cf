"""weekboard - weekly work-schedule board for the terminal."""

__version__ = "0.1.0"
