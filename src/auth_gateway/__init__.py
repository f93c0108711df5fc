"""Auth Gateway - bearer token issuance and OAuth code exchange brokering."""

__version__ = "0.1.0"
