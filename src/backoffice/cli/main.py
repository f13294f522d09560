import asyncio
import logging

import typer

from ..core.access import Role
from ..core.config import Settings
from ..core.database import PORTAL_MODELS, SALES_MODELS, DBConnection, build_tortoise_config
from ..core.exceptions import ConflictError
from ..core.logging_config import configure_logging
from ..portal.features.auth import service as portal_auth_service
from ..portal.features.auth.models import User
from ..sales.features.auth import service as sales_auth_service
from ..sales.features.orders.pricing import backfill_units

logger = logging.getLogger(__name__)

app = typer.Typer(name="backoffice", help="CLI for administering the portal and sales backoffice data.")

portal_app = typer.Typer(name="portal", help="Manage portal accounts.")
app.add_typer(portal_app)

sales_app = typer.Typer(name="sales", help="Manage sellers and order data.")
app.add_typer(sales_app)


def _settings() -> Settings:
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    return settings


def _portal_db() -> DBConnection:
    return DBConnection(build_tortoise_config(_settings().portal_database_url, PORTAL_MODELS))


def _sales_db(settings: Settings) -> DBConnection:
    return DBConnection(build_tortoise_config(settings.sales_database_url, SALES_MODELS))


# Portal account commands. Roles are only ever changed from here.
@portal_app.command("create-admin")
def create_admin_user_command(
    username: str = typer.Option(..., prompt=True, help="Username for the new admin."),
    password: str = typer.Option(..., prompt=True, hide_input=True, confirmation_prompt=True, help="Password for the new admin."),
):
    """Creates a new portal admin account."""
    asyncio.run(_create_admin_user(username, password))


async def _create_admin_user(username: str, password: str):
    async with _portal_db():
        typer.echo(f"Attempting to create admin user: {username}...")
        try:
            user = await portal_auth_service.create_user(username, password, role=Role.ADMIN)
        except ConflictError as e:
            typer.secho(f"Error: {e.detail}", fg=typer.colors.RED)
            raise typer.Exit(code=1)
        typer.secho(f"Admin user '{user.username}' created successfully with ID: {user.id}", fg=typer.colors.GREEN)


async def _set_role(username: str, role: Role):
    async with _portal_db():
        user = await User.get_or_none(username=username)
        if not user:
            typer.secho(f"Error: User with username '{username}' not found.", fg=typer.colors.RED)
            raise typer.Exit(code=1)

        if user.role == role:
            typer.secho(f"User '{username}' already has the {role.value} role.", fg=typer.colors.YELLOW)
            raise typer.Exit(code=0)

        user.role = role
        await user.save(update_fields=["role"])
        logger.info(f"Role of '{username}' changed to {role.value}")
        typer.secho(f"User '{username}' now has the {role.value} role.", fg=typer.colors.GREEN)


@portal_app.command("promote-to-admin")
def promote_user_to_admin_command(
    username: str = typer.Argument(..., help="The username of the user to promote to admin."),
):
    """Promotes an existing portal user to the admin role."""
    asyncio.run(_set_role(username, Role.ADMIN))


@portal_app.command("demote-to-user")
def demote_admin_to_user_command(
    username: str = typer.Argument(..., help="The username of the admin to demote."),
):
    """Returns an existing portal admin to the user role."""
    asyncio.run(_set_role(username, Role.USER))


# Sales commands
@sales_app.command("create-seller")
def create_seller_command(
    username: str = typer.Option(..., prompt=True, help="Username for the new seller."),
    nama: str = typer.Option(..., prompt="Full name", help="Display name for the new seller."),
    password: str = typer.Option(..., prompt=True, hide_input=True, confirmation_prompt=True, help="Password for the new seller."),
):
    """Creates a new seller account."""
    asyncio.run(_create_seller(username, nama, password))


async def _create_seller(username: str, nama: str, password: str):
    async with _sales_db(_settings()):
        try:
            seller = await sales_auth_service.create_seller(username, password, nama)
        except ConflictError as e:
            typer.secho(f"Error: {e.detail}", fg=typer.colors.RED)
            raise typer.Exit(code=1)
        typer.secho(f"Seller '{seller.username}' created successfully with ID: {seller.id}", fg=typer.colors.GREEN)


@sales_app.command("backfill-units")
def backfill_units_command():
    """Recomputes jumlah_produk on orders where it disagrees with the subtotal."""
    asyncio.run(_backfill_units())


async def _backfill_units():
    settings = _settings()
    async with _sales_db(settings):
        updated = await backfill_units(settings.unit_price)
        typer.secho(f"{updated} order(s) updated.", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
