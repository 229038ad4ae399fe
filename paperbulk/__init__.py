"""Paper bulk calculator — gsm / caliper / bulk / lb inference."""

__version__ = "1.0.0"
