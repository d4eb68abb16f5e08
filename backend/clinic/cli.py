import click
from flask.cli import AppGroup
from clinic.application.auth import create_admin
from clinic.application.holidays import import_national_holidays

clinic_cli = AppGroup("clinic", help="Clinic site maintenance commands.")


@clinic_cli.command("create-admin")
@click.argument("username")
@click.password_option()
def create_admin_command(username, password):
    """Create an admin login, or reset the password of an existing one."""
    create_admin(username=username, password=password)
    click.echo(f"Admin '{username}' saved")


@clinic_cli.command("import-holidays")
@click.option("--year", type=int, default=None, help="Defaults to the current year.")
def import_holidays_command(year):
    """Import national holidays from Calendarific."""
    result = import_national_holidays(year=year)
    click.echo(result["message"])
