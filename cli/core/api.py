import requests
from typing import Optional
from .config import BASE_URL, REQUEST_TIMEOUT


def _auth_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def api_signup(signup_data: dict) -> Optional[dict]:
    """
    Cria uma conta no backend.
    Devolve {"user": ..., "access_token": ...} ou None se falhar.
    """
    url = f"{BASE_URL}/auth/signup"
    try:
        resp = requests.post(url, json=signup_data, timeout=REQUEST_TIMEOUT)
    except requests.RequestException:
        return None
    if resp.status_code != 201:
        return None
    return resp.json()


def api_login(email: str, password: str) -> Optional[dict]:
    """
    Faz login no backend e devolve {"user": ..., "access_token": ...}.
    """
    url = f"{BASE_URL}/auth/login"
    data = {"email": email, "password": password}
    try:
        resp = requests.post(url, json=data, timeout=REQUEST_TIMEOUT)
    except requests.RequestException:
        return None
    if resp.status_code != 200:
        return None
    return resp.json()


def api_logout(token: str) -> bool:
    """
    Revoga o token no backend.
    """
    url = f"{BASE_URL}/auth/logout"
    try:
        resp = requests.post(url, headers=_auth_headers(token), timeout=REQUEST_TIMEOUT)
    except requests.RequestException:
        return False
    return resp.status_code == 200


def api_get_me(token: str) -> Optional[dict]:
    """
    Obtém os dados do utilizador autenticado (/users/me).
    Devolve None se o token for inválido, expirado ou revogado.
    """
    url = f"{BASE_URL}/users/me"
    try:
        resp = requests.get(url, headers=_auth_headers(token), timeout=REQUEST_TIMEOUT)
    except requests.RequestException:
        return None
    if resp.status_code != 200:
        return None
    return resp.json()
