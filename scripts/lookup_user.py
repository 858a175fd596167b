"""Look up an Okta user with their groups and app links.

Reads OKTA_ORG / OKTA_API_TOKEN from the environment or .env.

Usage:
    python -m scripts.lookup_user 00u1abcd
    python -m scripts.lookup_user 00u1abcd --app salesforce
"""

from __future__ import annotations

import sys

import click
from rich.console import Console
from rich.table import Table

from config.settings import get_settings
from observability.logger import setup_logging
from providers.exceptions import OktaAPIError, OktaError
from providers.okta_client import OktaClient

console = Console()


@click.command("lookup-user")
@click.argument("user_id")
@click.option("--app", "app_name", default="", help="Only show app links for this app name.")
def main(user_id: str, app_name: str) -> None:
    """Print a user's profile, groups and app links."""
    settings = get_settings()
    setup_logging(settings)

    if not settings.okta_org:
        console.print("[bold red]OKTA_ORG is not set.[/bold red]")
        sys.exit(2)

    with OktaClient.from_settings(settings) as client:
        try:
            user = client.user(user_id)
            groups = client.groups(user_id)
            links = client.app_links(user_id, app_name)
        except OktaAPIError as e:
            console.print(
                f"[bold red]{e.status_code} {e.error_code}[/bold red] {e.error.errorSummary}"
            )
            sys.exit(1)
        except OktaError as e:
            console.print(f"[bold red]Request failed:[/bold red] {e}")
            sys.exit(1)

        console.print(
            f"[bold]{user.profile.login}[/bold] ({user.id}) status=[cyan]{user.status}[/cyan]"
        )

        group_table = Table(title=f"Groups ({len(groups)})")
        group_table.add_column("ID", style="dim")
        group_table.add_column("Name", style="cyan")
        group_table.add_column("Type")
        for g in groups:
            group_table.add_row(g.id, g.profile.name, g.type or "")
        console.print(group_table)

        link_table = Table(title=f"App links ({len(links)})")
        link_table.add_column("App", style="cyan")
        link_table.add_column("Label")
        link_table.add_column("URL", style="dim")
        for link in links:
            link_table.add_row(link.appName, link.label, link.linkUrl)
        console.print(link_table)

        summary = client.metrics.summary()
        console.print(
            f"[dim]{summary['total_calls']} calls, avg {summary['avg_latency_ms']} ms[/dim]"
        )


if __name__ == "__main__":
    main()
