"""Test configuration and fixtures."""

import os
import pytest

from stance_github.api import GitHubClient

API = "https://api.example.test"
TOKEN = "ghp_test_token"


@pytest.fixture(autouse=True)
def setup_test_env():
    """Keep the developer's GitHub settings out of the tests."""
    original_env = dict(os.environ)

    for key in ('GITHUB_TOKEN', 'GITHUB_API_TOKEN', 'GITHUB_API_URL',
                'GITHUB_TIMEOUT', 'STANCE_GITHUB_DEBUG'):
        os.environ.pop(key, None)

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def client():
    """Client pointed at a fake API root, authenticated with a token."""
    github = GitHubClient(API).authenticate('token', TOKEN)
    yield github
    github.close()


@pytest.fixture
def org_data():
    """Organization as listed by /user/orgs."""
    return {
        'login': 'acme',
        'id': 42,
        'node_id': 'MDEyOk9yZ2FuaXphdGlvbjQy',
        'url': f'{API}/orgs/acme',
        'repos_url': f'{API}/orgs/acme/repos',
        'events_url': f'{API}/orgs/acme/events',
        'hooks_url': f'{API}/orgs/acme/hooks',
        'issues_url': f'{API}/orgs/acme/issues',
        'members_url': f'{API}/orgs/acme/members{{/member}}',
        'public_members_url': f'{API}/orgs/acme/public_members{{/member}}',
        'avatar_url': 'https://avatars.example.test/u/42?v=4',
        'description': 'Anvils and rockets'
    }


@pytest.fixture
def repo_data():
    """Repository as listed by an organization's repos URL."""
    return {
        'id': 1296269,
        'name': 'rocket',
        'full_name': 'acme/rocket',
        'private': False,
        'description': 'Rocket-powered roller skates',
        'fork': False,
        'url': f'{API}/repos/acme/rocket',
        'html_url': 'https://github.example.test/acme/rocket',
        'issues_url': f'{API}/repos/acme/rocket/issues{{/number}}',
        'pulls_url': f'{API}/repos/acme/rocket/pulls{{/number}}',
        'has_issues': True,
        'has_projects': True,
        'has_wiki': False,
        'has_pages': 0,
        'open_issues_count': 2,
        'default_branch': 'main'
    }


@pytest.fixture
def issues_data():
    """One plain issue and one pull request."""
    return [
        {
            'number': 7,
            'title': 'Skates veer left',
            'state': 'open',
            'user': {'login': 'wile'},
            'updated_at': '2024-05-01T12:00:00Z'
        },
        {
            'number': 8,
            'title': 'Add braking',
            'state': 'open',
            'user': {'login': 'roadrunner'},
            'updated_at': '2024-05-02T08:30:00Z',
            'pull_request': {
                'url': f'{API}/repos/acme/rocket/pulls/8'
            }
        }
    ]
