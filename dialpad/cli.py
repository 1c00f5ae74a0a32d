"""
Dialpad CLI - Command line access to the Dialpad API.

Provides quick manual access to common operations:
- Company info
- User listing and lookup
- Sending SMS
- Blocked numbers
- Call details
"""

import sys
import logging
from typing import Optional, Tuple

import click

from . import __version__
from .api import DialpadClient
from .config import DialpadConfig, HOSTS
from .exceptions import DialpadError
from .utils import (
    setup_logging,
    print_error,
    print_json,
    print_success,
)

logger = logging.getLogger(__name__)


# ============================================================================
# CLI Context
# ============================================================================

class DialpadContext:
    """CLI context object for sharing state between commands."""

    def __init__(self):
        self.config: Optional[DialpadConfig] = None
        self.quiet: bool = False

    def client(self) -> DialpadClient:
        """Create a client, exiting if no token is configured."""
        if self.config is None or not self.config.is_configured():
            print_error(
                "No Dialpad API token configured.",
                "Pass --token or set DIALPAD_API_KEY."
            )
            sys.exit(1)
        return DialpadClient(config=self.config)


pass_context = click.make_pass_decorator(DialpadContext, ensure=True)


def run(ctx: DialpadContext, operation) -> None:
    """Run an operation against a fresh client and print its result."""
    try:
        with ctx.client() as client:
            result = operation(client)
    except DialpadError as e:
        print_error(str(e))
        sys.exit(1)
    print_json(result)


# ============================================================================
# Main CLI Group
# ============================================================================

@click.group()
@click.version_option(version=__version__, prog_name='dialpad')
@click.option('--token', envvar='DIALPAD_API_KEY', help='API token')
@click.option(
    '--environment', '-e',
    type=click.Choice(sorted(HOSTS)),
    envvar='DIALPAD_ENVIRONMENT',
    default='sandbox',
    show_default=True,
    help='Dialpad environment'
)
@click.option('--base-url', envvar='DIALPAD_BASE_URL', help='Override the API base address')
@click.option('--company-id', envvar='DIALPAD_COMPANY_ID', help='Company ID header value')
@click.option('--timeout', type=float, envvar='DIALPAD_TIMEOUT', help='Request timeout in seconds')
@click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
@click.option('-q', '--quiet', is_flag=True, help='Suppress non-essential output')
@pass_context
def cli(
    ctx: DialpadContext,
    token: Optional[str],
    environment: str,
    base_url: Optional[str],
    company_id: Optional[str],
    timeout: Optional[float],
    verbose: bool,
    quiet: bool
):
    """
    Dialpad CLI - Command line access to the Dialpad API.

    \b
    Quick Start:
      export DIALPAD_API_KEY=...
      dialpad company
      dialpad users list --limit 10
    """
    setup_logging(verbose, quiet)
    ctx.quiet = quiet
    ctx.config = DialpadConfig(
        token=token or "",
        environment=environment,
        base_url=base_url,
        company_id=company_id,
        timeout=timeout,
    )


@cli.command('company')
@pass_context
def company(ctx: DialpadContext):
    """Show the company the token belongs to."""
    run(ctx, lambda client: client.company.get())


# ============================================================================
# Users
# ============================================================================

@cli.group('users')
def users():
    """User operations."""


@users.command('list')
@click.option('--limit', '-l', type=int, default=25, show_default=True, help='Maximum results')
@click.option('--email', help='Filter by email address')
@pass_context
def list_users(ctx: DialpadContext, limit: int, email: Optional[str]):
    """List users."""
    params = {"email": email} if email else None
    run(ctx, lambda client: client.user.list(limit, params))


@users.command('get')
@click.argument('user_id')
@pass_context
def get_user(ctx: DialpadContext, user_id: str):
    """Show a user ("me" for the token owner)."""
    run(ctx, lambda client: client.user.get(user_id))


# ============================================================================
# SMS
# ============================================================================

@cli.group('sms')
def sms():
    """SMS operations."""


@sms.command('send')
@click.option('--to', 'to_numbers', multiple=True, required=True, help='Recipient E.164 number (repeatable)')
@click.option('--text', '-t', required=True, help='Message text')
@click.option('--user-id', type=int, help='Sending user ID')
@click.option('--from', 'from_number', help='Number to send from')
@click.option('--infer-country-code', is_flag=True, help='Infer country code of local numbers')
@pass_context
def send_sms(
    ctx: DialpadContext,
    to_numbers: Tuple[str, ...],
    text: str,
    user_id: Optional[int],
    from_number: Optional[str],
    infer_country_code: bool
):
    """Send an SMS."""
    run(ctx, lambda client: client.sms.send_sms(
        text=text,
        to_numbers=list(to_numbers),
        user_id=user_id,
        from_number=from_number,
        infer_country_code=infer_country_code,
    ))


# ============================================================================
# Blocked Numbers
# ============================================================================

@cli.group('blocked')
def blocked():
    """Blocked number operations."""


@blocked.command('list')
@click.option('--limit', '-l', type=int, default=25, show_default=True, help='Maximum results')
@pass_context
def list_blocked(ctx: DialpadContext, limit: int):
    """List blocked numbers."""
    run(ctx, lambda client: client.blocked_number.list(limit))


@blocked.command('add')
@click.argument('numbers', nargs=-1, required=True)
@pass_context
def block(ctx: DialpadContext, numbers: Tuple[str, ...]):
    """Block inbound calls from NUMBERS."""
    run(ctx, lambda client: client.blocked_number.block_numbers(list(numbers)))
    if not ctx.quiet:
        print_success(f"Blocked {len(numbers)} number(s)")


@blocked.command('remove')
@click.argument('numbers', nargs=-1, required=True)
@pass_context
def unblock(ctx: DialpadContext, numbers: Tuple[str, ...]):
    """Unblock inbound calls from NUMBERS."""
    run(ctx, lambda client: client.blocked_number.unblock_numbers(list(numbers)))
    if not ctx.quiet:
        print_success(f"Unblocked {len(numbers)} number(s)")


# ============================================================================
# Calls
# ============================================================================

@cli.group('calls')
def calls():
    """Call operations."""


@calls.command('info')
@click.argument('call_id', type=int)
@pass_context
def call_info(ctx: DialpadContext, call_id: int):
    """Show details of a call."""
    run(ctx, lambda client: client.call.get_info(call_id))


# ============================================================================
# Entry Point
# ============================================================================

def main():
    """Main entry point for the CLI."""
    try:
        cli()
    except KeyboardInterrupt:
        click.echo("\nAborted.")
        sys.exit(130)
    except Exception as e:
        logger.exception("Unexpected error")
        print_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
