"""Fantasy football rules engine: scoring, pricing, budget and formation checks."""

__version__ = "0.1.0"
