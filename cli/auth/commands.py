import getpass
import typer

from cli.core.session import save_session, load_token, clear_session, is_logged_in
from cli.core.api import api_signup, api_login, api_logout, api_get_me
from cli.core.utils import check_signup_fields


app = typer.Typer(help="Authentication commands (signup, login, logout, whoami)")


@app.command("signup")
def signup(
    username: str = typer.Option(None, "--username", "-u", help="Username"),
    email: str = typer.Option(None, "--email", "-e", help="Email"),
    full_name: str = typer.Option(None, "--name", help="Full name"),
):
    """
    Create an account and start a session with the returned token.
    """
    if is_logged_in():
        typer.echo("Session already active. Logout first.")
        raise typer.Exit(code=1)

    if username is None:
        username = typer.prompt("Username")
    if email is None:
        email = typer.prompt("Email")

    password = getpass.getpass("Password: ")
    password_confirm = getpass.getpass("Confirm password: ")

    if password != password_confirm:
        typer.echo("Passwords do not match.")
        raise typer.Exit(code=1)

    error = check_signup_fields(username, email, password)
    if error:
        typer.echo(error)
        raise typer.Exit(code=1)

    result = api_signup({
        "username": username,
        "email": email,
        "password": password,
        "full_name": full_name,
    })
    if result is None:
        typer.echo("Signup failed (email/username taken or API error).")
        raise typer.Exit(code=1)

    save_session(result["access_token"], result["user"])
    typer.echo(f"Account created. Logged in as '{result['user']['username']}'.")


@app.command("login")
def login(
    email: str = typer.Option(None, "--email", "-e", help="Email"),
):
    """
    Login to the system. Only allowed if no session is active.
    """
    if is_logged_in():
        typer.echo("Session already active. Logout first to remove current session token.")
        raise typer.Exit(code=1)

    if email is None:
        email = typer.prompt("Email")

    password = getpass.getpass("Password: ")

    result = api_login(email, password)
    if result is None:
        typer.echo("Login failed (invalid credentials or API error).")
        raise typer.Exit(code=1)

    save_session(result["access_token"], result["user"])
    typer.echo(f"Login successful as '{result['user']['username']}'.")


@app.command("logout")
def logout():
    """
    Revoke the session token on the backend and delete it locally.
    """
    token = load_token()
    if token:
        if api_logout(token):
            typer.echo("Logged out from backend.")
        else:
            typer.echo("Warning: Failed to revoke the token on the backend.")

    clear_session()
    typer.echo("Session ended.")


@app.command("whoami")
def whoami():
    """
    Show the account behind the current session.
    """
    token = load_token()
    if not token:
        typer.echo("No active session.")
        raise typer.Exit(code=1)

    user = api_get_me(token)
    if user is None:
        typer.echo("Session is no longer valid (expired or revoked). Login again.")
        raise typer.Exit(code=1)

    typer.echo(f"{user['username']} <{user['email']}> (id {user['id']})")
