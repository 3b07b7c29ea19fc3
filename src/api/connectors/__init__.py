"""Connectors: adapters de borda por origem de webhook.

Estrutura:
- quoteiq/: envelope `{type, payload}` do QuoteIQ
"""

__all__: list[str] = []
