"""Application – use cases around the table encoder."""
