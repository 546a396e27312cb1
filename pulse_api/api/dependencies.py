from fastapi import Request

from pulse_api.services.ledger_client import LedgerClient

def get_ledger_client(request: Request) -> LedgerClient:
    """Retorna el cliente RPC compartido creado al iniciar la aplicación."""
    return request.app.state.ledger
