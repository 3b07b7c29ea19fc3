"""Encaminhamento de eventos para planilha."""

from app.infra.sheets.sheets_forwarder import GoogleSheetsForwarder

__all__ = ["GoogleSheetsForwarder"]
