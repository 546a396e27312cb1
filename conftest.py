from pathlib import Path
from dotenv import load_dotenv

# Carga las variables de entorno del archivo .env.test
load_dotenv(Path(__file__).parent / '.env.test')
