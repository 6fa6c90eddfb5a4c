"""
Shapes a page of catalog rows into the search response
"""
import logging
from datetime import timezone

from .query import total_pages

logger = logging.getLogger(__name__)

API_VERSION = '1'


class ConsistencyWarning(Exception):
    """More than one latest row was found for the same repository."""


def check_non_repeatability(rows):
    """
    Raise ConsistencyWarning if two rows share a repository.

    Only the rows given are compared, so a duplicate split across pages
    goes unnoticed.
    """
    seen = set()
    for row in rows:
        repo = f"{row.repo_owner}/{row.repo_name}"
        if repo in seen:
            raise ConsistencyWarning(f"found duplicate item: {repo}")
        seen.add(repo)


def to_iso8601(value):
    """Format a datetime as ECMA-262 ISO-8601 (millisecond precision, Z suffix)"""
    return value.astimezone(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def project_entry(entry, host):
    return {
        'repoPath': entry.repo_path(host),
        'repoOwner': entry.repo_owner,
        'repoName': entry.repo_name,
        'latestVersion': entry.version,
        'latestVersionReleasedAt': to_iso8601(entry.released_at),
        'name': entry.name,
        'description': entry.description,
        'author': entry.author,
        'tags': entry.tag_names(),
        'avatarUrl': entry.avatar_url or None,
        'repoCreatedAt': to_iso8601(entry.repo_created_at),
        'starCount': entry.star_count,
    }


def build_response(count, rows, params, host):
    """
    Build the response envelope for one page of results.

    Duplicate repositories on the page are logged and kept; the response
    still goes out.
    """
    try:
        check_non_repeatability(rows)
    except ConsistencyWarning as e:
        logger.error(f"failed to validate non-repeatability: {e}")

    return {
        'apiVersion': API_VERSION,
        'data': {
            'pageIndex': params.page,
            'totalPages': total_pages(count, params.per_page),
            'items': [project_entry(row, host) for row in rows],
        },
    }
