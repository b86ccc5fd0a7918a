"""
Flask CLI commands.

Commands:
- flask init-db: Create all tables
- flask issue-token: Issue an identity token for a member's user id (local testing)
"""

import click
from commerce.database import create_schema, get_session
from commerce.models import Member
from commerce.services.token_service import issue_token


def init_cli_commands(app):
    """Register CLI commands with Flask app."""

    @app.cli.command('init-db')
    def init_db_command():
        """Create database tables for every model."""
        create_schema()
        click.echo(click.style('✅ 테이블이 생성되었습니다.', fg='green'))

    @app.cli.command('issue-token')
    @click.option('--user-id', required=True, help='External user id of the member')
    @click.option('--minutes', type=int, default=None, help='Token lifetime in minutes')
    def issue_token_command(user_id, minutes):
        """Issue a bearer token for an existing member."""
        member = get_session().query(Member).filter_by(user_id=user_id, activated=True).first()
        if not member:
            click.echo(click.style(f'❌ 활성화된 회원이 없습니다: {user_id}', fg='red'))
            return
        click.echo(issue_token(user_id, expires_minutes=minutes))
