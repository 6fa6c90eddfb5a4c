"""
Script to create sample teeth for demonstration
"""
import os
import sys
from datetime import datetime, timezone

import django

# Fix Windows console encoding
if sys.platform == 'win32':
    sys.stdout.reconfigure(encoding='utf-8')

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'toothsearch.settings')
django.setup()

from django.conf import settings
from teeth.ingest import RepoInfo, ingest_manifest
from teeth.manifest import ManifestValidationError


def utc(*args):
    return datetime(*args, tzinfo=timezone.utc)


teeth_data = [
    {
        'owner': 'LiteLDev',
        'name': 'LeviLamina',
        'stars': 512,
        'created_at': utc(2023, 1, 20),
        'info': {
            'name': 'LeviLamina',
            'description': 'A lightweight, modular and versatile mod loader',
            'author': 'LiteLDev',
            'tags': ['mod-loader', 'core'],
            'avatar_url': 'https://avatars.githubusercontent.com/u/101136735',
        },
        'versions': [
            ('0.9.0', utc(2024, 2, 1)),
            ('0.10.0', utc(2024, 3, 15)),
        ],
    },
    {
        'owner': 'LiteLDev',
        'name': 'LegacyScriptEngine',
        'stars': 87,
        'created_at': utc(2023, 6, 2),
        'info': {
            'name': 'Legacy Script Engine',
            'description': 'Run legacy scripts on a modern loader',
            'author': 'LiteLDev',
            'tags': ['scripting'],
        },
        'versions': [
            ('0.1.0', utc(2024, 1, 10)),
        ],
    },
    {
        'owner': 'acme',
        'name': 'http-client',
        'stars': 10,
        'created_at': utc(2022, 11, 5),
        'info': {
            'name': 'HTTP Client',
            'description': 'Small HTTP client for plugins',
            'author': 'Acme Corp',
            'tags': ['network', 'http'],
        },
        'versions': [
            ('1.0.0', utc(2023, 2, 1)),
            ('1.1.0', utc(2023, 8, 19)),
            ('1.2.0', utc(2024, 4, 2)),
        ],
    },
]

host = settings.TOOTH_REPO_HOST

for tooth in teeth_data:
    repo = RepoInfo(
        owner=tooth['owner'],
        name=tooth['name'],
        star_count=tooth['stars'],
        created_at=tooth['created_at'],
    )
    for version, released_at in tooth['versions']:
        raw = {
            'tooth': repo.path(host),
            'version': version,
            'info': tooth['info'],
        }
        try:
            entry = ingest_manifest(raw, repo, released_at, host=host)
            print(f"✓ Ingested {entry}")
        except ManifestValidationError as e:
            print(f"✗ Skipped {repo.path(host)}@{version}: {e}")

print("\n✓ Sample data created successfully!")
