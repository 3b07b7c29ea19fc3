"""Connector QuoteIQ: borda do webhook de estimates e schedules."""
