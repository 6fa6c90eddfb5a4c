"""
Tests for shaping search results
"""
from datetime import datetime, timedelta, timezone

from django.test import TestCase
from teeth.search.params import parse_params
from teeth.search.results import (
    API_VERSION,
    ConsistencyWarning,
    build_response,
    check_non_repeatability,
    project_entry,
    to_iso8601,
)
from .helpers import create_tooth_version, utc


class CheckNonRepeatabilityTests(TestCase):
    """Tests for the duplicate-latest check"""

    def test_distinct_rows_pass(self):
        rows = [
            create_tooth_version(repo_name='a'),
            create_tooth_version(repo_name='b'),
        ]
        check_non_repeatability(rows)

    def test_duplicate_repo_raises(self):
        """Test that two rows for one repository are reported"""
        rows = [
            create_tooth_version(repo_name='a', version='1.0.0'),
            create_tooth_version(repo_name='a', version='1.1.0'),
        ]
        with self.assertRaisesMessage(ConsistencyWarning, 'found duplicate item: acme/a'):
            check_non_repeatability(rows)

    def test_same_name_different_owner(self):
        """Test that only owner and name together identify a repository"""
        rows = [
            create_tooth_version(repo_owner='x', repo_name='a'),
            create_tooth_version(repo_owner='y', repo_name='a'),
        ]
        check_non_repeatability(rows)


class ProjectEntryTests(TestCase):
    """Tests for projecting a row to a response item"""

    def setUp(self):
        self.entry = create_tooth_version(
            repo_owner='LiteLDev', repo_name='LeviLamina', version='0.10.0',
            name='LeviLamina', description='Mod loader', author='LiteLDev',
            star_count=512, avatar_url='https://example.com/a.png',
            repo_created_at=utc(2023, 1, 20, 8, 30),
            released_at=utc(2024, 3, 15, 12, 0, 0, 250000),
            tags=['mod-loader', 'core'])

    def test_projection(self):
        """Test every field of a projected item"""
        self.assertEqual(project_entry(self.entry, 'github.com'), {
            'repoPath': 'github.com/LiteLDev/LeviLamina',
            'repoOwner': 'LiteLDev',
            'repoName': 'LeviLamina',
            'latestVersion': '0.10.0',
            'latestVersionReleasedAt': '2024-03-15T12:00:00.250Z',
            'name': 'LeviLamina',
            'description': 'Mod loader',
            'author': 'LiteLDev',
            'tags': ['core', 'mod-loader'],
            'avatarUrl': 'https://example.com/a.png',
            'repoCreatedAt': '2023-01-20T08:30:00.000Z',
            'starCount': 512,
        })

    def test_repo_path_uses_host(self):
        """Test that repoPath is '<host>/<owner>/<name>'"""
        for host in ['github.com', 'gitea.example.org']:
            with self.subTest(host=host):
                item = project_entry(self.entry, host)
                self.assertEqual(item['repoPath'], f'{host}/LiteLDev/LeviLamina')

    def test_missing_avatar_url_is_none(self):
        """Test that a missing avatar is rendered as None"""
        entry = create_tooth_version(repo_name='plain', avatar_url='')
        self.assertIsNone(project_entry(entry, 'github.com')['avatarUrl'])

    def test_iso8601(self):
        self.assertEqual(to_iso8601(utc(2024, 1, 2, 3, 4, 5)), '2024-01-02T03:04:05.000Z')

    def test_whole_second_keeps_milliseconds(self):
        """Test that whole-second timestamps still carry .000"""
        entry = create_tooth_version(repo_name='whole', released_at=utc(2024, 2, 3))
        self.assertEqual(project_entry(entry, 'github.com')['latestVersionReleasedAt'], '2024-02-03T00:00:00.000Z')

    def test_microseconds_truncated(self):
        """Test that sub-millisecond precision is dropped"""
        self.assertEqual(to_iso8601(utc(2024, 1, 1, 0, 0, 0, 999999)), '2024-01-01T00:00:00.999Z')

    def test_non_utc_converted(self):
        """Test that aware non-UTC datetimes are shifted to UTC"""
        plus_two = timezone(timedelta(hours=2))
        self.assertEqual(to_iso8601(datetime(2024, 1, 1, 2, 0, tzinfo=plus_two)), '2024-01-01T00:00:00.000Z')


class BuildResponseTests(TestCase):
    """Tests for the response envelope"""

    def test_envelope(self):
        """Test apiVersion, pageIndex and totalPages"""
        rows = [create_tooth_version(repo_name='a')]
        params = parse_params({'perPage': '1', 'page': '2'})
        body = build_response(3, rows, params, 'github.com')
        self.assertEqual(body['apiVersion'], API_VERSION)
        self.assertEqual(body['data']['pageIndex'], 2)
        self.assertEqual(body['data']['totalPages'], 3)
        self.assertEqual(len(body['data']['items']), 1)

    def test_no_results(self):
        """Test that an empty catalog gives zero pages"""
        body = build_response(0, [], parse_params({}), 'github.com')
        self.assertEqual(body['data'], {'pageIndex': 1, 'totalPages': 0, 'items': []})

    def test_duplicates_logged_not_raised(self):
        """Test that duplicate rows are logged and still returned"""
        rows = [
            create_tooth_version(repo_name='a', version='1.0.0'),
            create_tooth_version(repo_name='a', version='1.1.0'),
        ]
        with self.assertLogs('teeth.search.results', level='ERROR') as logs:
            body = build_response(2, rows, parse_params({}), 'github.com')
        self.assertIn('failed to validate non-repeatability: found duplicate item: acme/a', logs.output[0])
        self.assertEqual(len(body['data']['items']), 2)
