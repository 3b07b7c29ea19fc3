"""API: camada de borda HTTP.

Responsabilidades:
- Receber o webhook do QuoteIQ
- Validar o envelope antes de qualquer processamento
- Expor health e readiness

Subpastas:
- connectors/: parsing do webhook por origem
- routes/: endpoints HTTP (webhook, health)

NÃO PODE conter: regras de reconciliação nem acesso direto a calendário/planilha.
"""
