from django.db import models
from teeth.manifest import MAX_AUTHOR_LENGTH, MAX_AVATAR_URL_LENGTH, MAX_NAME_LENGTH, MAX_VERSION_LENGTH


class ToothVersion(models.Model):
    """
    Represents one published version of a tooth (e.g., 'github.com/acme/lib' at 1.2.0).
    Exactly one row per repository is expected to carry is_latest=True; the
    ingestion side keeps that true eventually, not transactionally.
    """
    repo_owner = models.CharField(max_length=255, db_index=True)
    repo_name = models.CharField(max_length=255, db_index=True)
    version = models.CharField(max_length=MAX_VERSION_LENGTH)

    # Manifest information
    name = models.CharField(max_length=MAX_NAME_LENGTH)
    description = models.TextField(blank=True)
    author = models.CharField(max_length=MAX_AUTHOR_LENGTH, blank=True)
    tags = models.ManyToManyField('Tag', related_name='tooth_versions', blank=True)
    avatar_url = models.URLField(max_length=MAX_AVATAR_URL_LENGTH, blank=True, null=True)

    # Repository provenance and ranking
    star_count = models.PositiveIntegerField(default=0)
    repo_created_at = models.DateTimeField()
    released_at = models.DateTimeField()

    is_latest = models.BooleanField(default=False, db_index=True)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-released_at']
        unique_together = ['repo_owner', 'repo_name', 'version']

    def __str__(self):
        return f"{self.repo_owner}/{self.repo_name}@{self.version}"

    def repo_path(self, host):
        return f"{host}/{self.repo_owner}/{self.repo_name}"

    def tag_names(self):
        """Return tag names sorted alphabetically"""
        return sorted(tag.name for tag in self.tags.all())
