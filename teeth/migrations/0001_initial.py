from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Tag',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100, unique=True)),
            ],
            options={
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='ToothVersion',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('repo_owner', models.CharField(db_index=True, max_length=255)),
                ('repo_name', models.CharField(db_index=True, max_length=255)),
                ('version', models.CharField(max_length=100)),
                ('name', models.CharField(max_length=255)),
                ('description', models.TextField(blank=True)),
                ('author', models.CharField(blank=True, max_length=255)),
                ('avatar_url', models.URLField(blank=True, max_length=500, null=True)),
                ('star_count', models.PositiveIntegerField(default=0)),
                ('repo_created_at', models.DateTimeField()),
                ('released_at', models.DateTimeField()),
                ('is_latest', models.BooleanField(db_index=True, default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('tags', models.ManyToManyField(blank=True, related_name='tooth_versions', to='teeth.tag')),
            ],
            options={
                'ordering': ['-released_at'],
                'unique_together': {('repo_owner', 'repo_name', 'version')},
            },
        ),
    ]
