"""Federal Form 1040 spine calculator."""

__version__ = "0.1.0"
