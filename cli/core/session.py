# cli/core/session.py
import json
from typing import Optional

from .config import APP_DIR, SESSION_FILE


def save_session(access_token: str, user: dict) -> None:
    """
    Guarda o access_token e os dados básicos do utilizador em SESSION_FILE.
    """
    APP_DIR.mkdir(parents=True, exist_ok=True)
    data = {
        "access_token": access_token,
        "user": {"id": user.get("id"), "username": user.get("username"), "email": user.get("email")},
    }
    with open(SESSION_FILE, "w", encoding="utf-8") as f:
        json.dump(data, f)


def load_session() -> Optional[dict]:
    """
    Lê o ficheiro de sessão.
    Devolve None se o ficheiro não existir ou estiver inválido.
    """
    if not SESSION_FILE.exists():
        return None

    try:
        with open(SESSION_FILE, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError):
        # Ficheiro ilegível: não há sessão válida
        return None
    return data if isinstance(data, dict) else None


def load_token() -> Optional[str]:
    session = load_session()
    if session is None:
        return None
    return session.get("access_token")


def clear_session() -> None:
    """
    Apaga o ficheiro de sessão, terminando a sessão local.
    """
    if SESSION_FILE.exists():
        SESSION_FILE.unlink()


def is_logged_in() -> bool:
    return load_token() is not None
