#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ToothSearch CLI tool

Usage:
    toothsearch search [QUERY ...] [--tag TAG] [--sort KEY] [--order ORDER]
    toothsearch validate <path/to/tooth.json>

Example:
    toothsearch search http --tag network --sort updatedAt
    toothsearch validate ./tooth.json

This tool:
- Search: Queries a ToothSearch server and prints one line per tooth
- Validate: Checks a local tooth.json against the manifest schema before publishing
"""

import sys
import os
import json
import requests
from pathlib import Path
import argparse

DEFAULT_SERVER = os.environ.get('TOOTHSEARCH_SERVER', 'http://localhost:8000')


def build_search_params(terms, tags, sort, order, page, per_page):
    """Build the query-string parameters for /search/teeth."""
    tokens = list(terms) + [f"tag:{tag}" for tag in tags]
    params = {
        'sort': sort,
        'order': order,
        'page': str(page),
        'perPage': str(per_page),
    }
    if tokens:
        params['q'] = ' '.join(tokens)
    return params


def search_teeth(server_url, params):
    """
    Call the search endpoint.

    Returns (status_code, body) where body is the decoded JSON response.
    """
    url = f"{server_url.rstrip('/')}/search/teeth"
    response = requests.get(url, params=params, timeout=30)
    try:
        body = response.json()
    except ValueError:
        body = {'code': response.status_code, 'message': response.text}
    return response.status_code, body


def format_item(item):
    """One line per tooth: path, version, stars and description."""
    line = f"{item['repoPath']}@{item['latestVersion']}  ★{item['starCount']}"
    if item.get('description'):
        line += f"  {item['description']}"
    if item.get('tags'):
        line += f"  [{', '.join(item['tags'])}]"
    return line


def cmd_search(args):
    params = build_search_params(
        args.query, args.tag, args.sort, args.order, args.page, args.per_page)

    try:
        status, body = search_teeth(args.server, params)
    except requests.RequestException as e:
        print(f"✗ Could not reach {args.server}: {e}")
        return 1

    if status != 200:
        print(f"✗ Search failed ({status}): {body.get('message', 'unknown error')}")
        return 1

    data = body['data']
    if not data['items']:
        print("No teeth found")
        return 0

    for item in data['items']:
        print(format_item(item))
    print(f"\nPage {data['pageIndex']} of {data['totalPages']}")
    return 0


def cmd_validate(args):
    from teeth.manifest import ManifestValidationError, validate_manifest

    path = Path(args.path)
    if path.is_dir():
        path = path / 'tooth.json'

    try:
        raw = json.loads(path.read_text(encoding='utf-8'))
    except OSError as e:
        print(f"✗ Could not read {path}: {e}")
        return 1
    except ValueError as e:
        print(f"✗ {path} is not valid JSON: {e}")
        return 1

    try:
        manifest = validate_manifest(raw)
    except ManifestValidationError as e:
        print(f"✗ {e}")
        return 1

    print(f"✓ {manifest.tooth_repo_path}@{manifest.version} is valid")
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='toothsearch',
        description='ToothSearch - Search the tooth catalog and check manifests',
    )
    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    # Search command
    search_parser = subparsers.add_parser('search', help='Search the catalog')
    search_parser.add_argument('query', nargs='*', help='Free-text terms (all must match)')
    search_parser.add_argument('--tag', action='append', default=[],
                               help='Only teeth carrying this tag (repeatable)')
    search_parser.add_argument('--sort', default='starCount',
                               choices=['starCount', 'createdAt', 'updatedAt'])
    search_parser.add_argument('--order', default='descending',
                               choices=['ascending', 'descending'])
    search_parser.add_argument('--page', type=int, default=1)
    search_parser.add_argument('--per-page', type=int, default=20)
    search_parser.add_argument('--server', default=DEFAULT_SERVER,
                               help=f'ToothSearch server URL (default: {DEFAULT_SERVER})')

    # Validate command
    validate_parser = subparsers.add_parser('validate', help='Validate a tooth.json')
    validate_parser.add_argument('path', help='Path to tooth.json or the directory holding it')

    args = parser.parse_args(argv)

    if args.command == 'search':
        return cmd_search(args)
    if args.command == 'validate':
        return cmd_validate(args)

    parser.print_help()
    return 1


if __name__ == '__main__':
    sys.exit(main())
