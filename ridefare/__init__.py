"""RideFare: ride-hailing fare comparison service"""

__version__ = "1.0.0"
