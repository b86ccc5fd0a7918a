"""
Tests for the Flask CLI commands.
"""

from commerce.services.token_service import get_user_id_by_token


class TestIssueTokenCommand:
    """Tests for `flask issue-token`."""

    def test_issues_token_for_active_member(self, app, session, member):
        user_id = member.user_id

        result = app.test_cli_runner().invoke(args=['issue-token', '--user-id', user_id])

        assert result.exit_code == 0
        assert get_user_id_by_token(result.output.strip()) == user_id

    def test_unknown_member(self, app, session):
        result = app.test_cli_runner().invoke(args=['issue-token', '--user-id', 'nobody'])

        assert result.exit_code == 0
        assert '활성화된 회원이 없습니다: nobody' in result.output

    def test_deactivated_member(self, app, session, new_member):
        new_member('leftId', activated=False)

        result = app.test_cli_runner().invoke(args=['issue-token', '--user-id', 'leftId'])

        assert '활성화된 회원이 없습니다: leftId' in result.output

    def test_user_id_is_required(self, app, session):
        result = app.test_cli_runner().invoke(args=['issue-token'])

        assert result.exit_code != 0


class TestInitDbCommand:
    """Tests for `flask init-db`."""

    def test_creates_tables(self, app, session):
        result = app.test_cli_runner().invoke(args=['init-db'])

        assert result.exit_code == 0
        assert '테이블이 생성되었습니다' in result.output
