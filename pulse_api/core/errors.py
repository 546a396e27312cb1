"""
Excepciones de la API. Cada una lleva el código HTTP con el que se responde.
"""


class ApiError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ClientInputError(ApiError, ValueError):
    """Entrada inválida del cliente (dirección o cantidad mal formada)."""

    status_code = 400


class UpstreamError(ApiError):
    """Fallo del nodo RPC: revert, timeout, error de red o respuesta mal formada."""

    status_code = 500


class RouteNotFoundError(ApiError):
    status_code = 404

    def __init__(self, message: str = "Not Found"):
        super().__init__(message)
