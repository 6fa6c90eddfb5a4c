"""
Shared fixtures for the teeth tests
"""
from datetime import datetime, timezone

from teeth.models import Tag, ToothVersion


def utc(*args):
    return datetime(*args, tzinfo=timezone.utc)


def create_tooth_version(repo_owner='acme', repo_name='lib', version='1.0.0', tags=(), **overrides):
    """Create a catalog row; latest by default"""
    fields = {
        'name': repo_name,
        'description': f'The {repo_name} tooth',
        'author': repo_owner,
        'star_count': 0,
        'repo_created_at': utc(2023, 1, 1),
        'released_at': utc(2024, 1, 1),
        'is_latest': True,
    }
    fields.update(overrides)
    entry = ToothVersion.objects.create(
        repo_owner=repo_owner, repo_name=repo_name, version=version, **fields)
    entry.tags.set([Tag.objects.get_or_create(name=tag)[0] for tag in tags])
    return entry


def raw_manifest(tooth='github.com/acme/lib', version='1.0.0', **info_overrides):
    """A tooth.json document that passes validation"""
    info = {
        'name': 'Lib',
        'description': 'A test tooth',
        'author': 'Acme',
        'tags': ['utility'],
    }
    info.update(info_overrides)
    return {
        'format_version': 2,
        'tooth': tooth,
        'version': version,
        'info': info,
    }
