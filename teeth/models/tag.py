from django.db import models
from teeth.manifest import MAX_TAG_LENGTH


class Tag(models.Model):
    """
    Tag declared in a tooth manifest. Matched exactly by `tag:` search tokens.
    """
    name = models.CharField(max_length=MAX_TAG_LENGTH, unique=True)

    class Meta:
        ordering = ['name']

    def __str__(self):
        return self.name

    def version_count(self):
        return self.tooth_versions.count()
