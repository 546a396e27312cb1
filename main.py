"""
Punto de entrada: levanta la API de precios de PulseChain con uvicorn.
"""

import uvicorn

from pulse_api.core.config import settings
from pulse_api.main import app

if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
