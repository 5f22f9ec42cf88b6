"""Flask CLI commands: flask create-admin | init-content | purge-tokens"""
import click
from flask import current_app

from models import storage
from models.admin import Admin, AdminRole
from services import content_service, session_manager
from utils.security import hash_password


def create_admin(email: str, password: str, name: str, role: AdminRole = AdminRole.ADMIN):
    """Create an admin account; returns None when the email is already taken."""
    email = email.strip().lower()
    session = storage.get_session()
    if session.query(Admin).filter(Admin.email == email).first():
        return None
    admin = Admin(email=email, password_hash=hash_password(password), name=name, role=role)
    storage.new(admin)
    storage.save()
    return admin


def register_commands(app):
    @app.cli.command("create-admin")
    @click.option("--email", default=None, help="Defaults to ADMIN_EMAIL")
    @click.option("--password", default=None, help="Defaults to ADMIN_PASSWORD")
    @click.option("--name", default=None, help="Defaults to ADMIN_NAME")
    def create_admin_command(email, password, name):
        """Create the first admin account."""
        cfg = current_app.config
        admin = create_admin(email or cfg["ADMIN_EMAIL"], password or cfg["ADMIN_PASSWORD"],
                             name or cfg["ADMIN_NAME"])
        if admin is None:
            click.echo("Admin already exists")
            return
        click.echo(f"Created admin {admin.email}")

    @app.cli.command("init-content")
    def init_content_command():
        """Store the default content for every page that has none."""
        created = content_service.initialize_all()
        click.echo(f"Initialized {len(created)} pages with default content")

    @app.cli.command("purge-tokens")
    def purge_tokens_command():
        """Delete expired refresh tokens."""
        removed = session_manager.purge_expired_refresh_tokens()
        click.echo(f"Purged {removed} expired refresh tokens")
