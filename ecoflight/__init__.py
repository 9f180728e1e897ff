"""EcoFlight: flight emissions estimator."""

__version__ = "1.0.0"
