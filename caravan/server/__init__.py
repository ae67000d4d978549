"""HTTP API for Caravan."""
