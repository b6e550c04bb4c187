# cli/core/config.py
from pathlib import Path
import os

# URL do backend FastAPI
BASE_URL = os.environ.get("STOREFRONT_URL", "http://localhost:8000")

# Timeout (segundos) para os pedidos HTTP
REQUEST_TIMEOUT = float(os.environ.get("STOREFRONT_TIMEOUT", "10"))

# Pasta onde a CLI guarda dados locais (token de sessão)
APP_DIR = Path(os.environ.get("STOREFRONT_HOME", Path.home() / ".storefront"))

# Ficheiro onde guardamos o token de sessão
SESSION_FILE = APP_DIR / "session.json"
