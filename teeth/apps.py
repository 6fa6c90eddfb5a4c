from django.apps import AppConfig


class TeethConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'teeth'

    def ready(self):
        """Compile the manifest schema when Django starts"""
        import teeth.manifest  # noqa
