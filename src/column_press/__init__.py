"""Column Press - HTML-styled text flowed into two-column PDF pages."""

__version__ = "0.1.0"
