"""App: orquestração, serviços e infraestrutura da sincronização QuoteIQ.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- coordinators/: roteamento de eventos QuoteIQ
- domain/: envelope, evento de calendário e resultados de reconciliação
- services/: engine de sincronização do calendário
- infra/: implementações concretas de IO (calendário, planilha, stores)
- protocols/: contratos/interfaces
- observability/: correlation_id e métricas via logs estruturados

Padrão: app executa; api adapta; config configura; utils apoia.
"""
