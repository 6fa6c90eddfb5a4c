from django.contrib import admin
from teeth.models import Tag


@admin.register(Tag)
class TagAdmin(admin.ModelAdmin):
    list_display = ['name', 'version_count']
    search_fields = ['name']

    def version_count(self, obj):
        return obj.version_count()
    version_count.short_description = 'Versions'
