"""GreenPath trip footprint aggregation core."""

__version__ = "0.1.0"
