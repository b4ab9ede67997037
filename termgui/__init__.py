"""Native Android interfaces from Termux through the Termux:GUI plugin."""

__version__ = "0.1.0"