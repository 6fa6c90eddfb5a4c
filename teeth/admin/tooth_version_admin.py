from django.contrib import admin
from teeth.models import ToothVersion


@admin.register(ToothVersion)
class ToothVersionAdmin(admin.ModelAdmin):
    list_display = ['repo', 'version', 'name', 'star_count', 'is_latest', 'released_at']
    list_filter = ['is_latest', 'released_at']
    search_fields = ['repo_owner', 'repo_name', 'name', 'description', 'author']
    readonly_fields = ['created_at', 'updated_at']
    filter_horizontal = ['tags']

    fieldsets = [
        ('Repository', {
            'fields': ['repo_owner', 'repo_name', 'star_count', 'repo_created_at']
        }),
        ('Version', {
            'fields': ['version', 'released_at', 'is_latest']
        }),
        ('Manifest', {
            'fields': ['name', 'description', 'author', 'tags', 'avatar_url']
        }),
        ('Timestamps', {
            'fields': ['created_at', 'updated_at'],
            'classes': ['collapse']
        }),
    ]

    def repo(self, obj):
        return f"{obj.repo_owner}/{obj.repo_name}"
    repo.short_description = 'Repository'
