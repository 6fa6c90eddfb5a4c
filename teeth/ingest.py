"""
Ingestion gate for the tooth catalog

Every manifest goes through validate_manifest before a catalog row is
written from it. The poller that discovers releases upstream calls
ingest_manifest once per release it observes.
"""
import logging
from dataclasses import dataclass
from datetime import datetime

from django.conf import settings
from django.db import transaction

from teeth.manifest import ManifestValidationError, validate_manifest
from teeth.models import Tag, ToothVersion

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RepoInfo:
    """Upstream repository facts that do not come from the manifest"""
    owner: str
    name: str
    star_count: int
    created_at: datetime

    def path(self, host):
        return f"{host}/{self.owner}/{self.name}"


def check_repo_path(manifest, repo, host):
    """Refuse a manifest that claims to describe another repository"""
    expected = repo.path(host)
    if manifest.tooth_repo_path.lower() != expected.lower():
        raise ManifestValidationError(
            f"tooth.json is invalid: tooth {manifest.tooth_repo_path} "
            f"does not match repository {expected}")


def refresh_latest(repo_owner, repo_name):
    """
    Move is_latest to the most recently released row of one repository.

    Returns the row now flagged as latest.
    """
    versions = ToothVersion.objects.filter(repo_owner=repo_owner, repo_name=repo_name)
    latest = versions.order_by('-released_at', '-id').first()
    if latest is None:
        return None
    versions.exclude(pk=latest.pk).filter(is_latest=True).update(is_latest=False)
    if not latest.is_latest:
        latest.is_latest = True
        latest.save(update_fields=['is_latest', 'updated_at'])
    return latest


def ingest_manifest(raw, repo, released_at, host=None):
    """
    Validate a raw tooth.json and upsert its catalog row.

    Args:
        raw: The tooth.json document as parsed JSON.
        repo: RepoInfo for the repository the release belongs to.
        released_at: When this version was released upstream.
        host: Repository host; defaults to settings.TOOTH_REPO_HOST.

    Returns the stored ToothVersion. Raises ManifestValidationError, with
    nothing written, if the manifest is rejected.
    """
    host = host or settings.TOOTH_REPO_HOST
    manifest = validate_manifest(raw)
    check_repo_path(manifest, repo, host)

    with transaction.atomic():
        tooth_version, created = ToothVersion.objects.update_or_create(
            repo_owner=repo.owner,
            repo_name=repo.name,
            version=manifest.version,
            defaults={
                'name': manifest.name,
                'description': manifest.description,
                'author': manifest.author,
                'avatar_url': manifest.avatar_url,
                'star_count': repo.star_count,
                'repo_created_at': repo.created_at,
                'released_at': released_at,
            }
        )
        tooth_version.tags.set(
            [Tag.objects.get_or_create(name=tag)[0] for tag in set(manifest.tags)])

        # Ranking facts belong to the repository, not to a single version
        ToothVersion.objects.filter(repo_owner=repo.owner, repo_name=repo.name).update(
            star_count=repo.star_count,
            repo_created_at=repo.created_at,
        )

        latest = refresh_latest(repo.owner, repo.name)

    action = "Created" if created else "Updated"
    logger.info(f"{action} {tooth_version}; latest is {latest.version}")
    tooth_version.refresh_from_db()
    return tooth_version
