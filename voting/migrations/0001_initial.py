from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Nomination',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=255, verbose_name='Title')),
                ('description', models.TextField(blank=True, default='', verbose_name='Description')),
                ('position', models.IntegerField(default=0, help_text='Display order (lower = first)', verbose_name='Position')),
                ('image_url', models.URLField(blank=True, db_column='imageurl', max_length=500, null=True, verbose_name='Image URL')),
                ('is_published', models.BooleanField(default=True, help_text='If False, the nomination is hidden from the public API', null=True, verbose_name='Published')),
            ],
            options={
                'verbose_name': 'Nomination',
                'verbose_name_plural': 'Nominations',
                'db_table': 'nominations',
                'ordering': ['position', 'id'],
            },
        ),
        migrations.CreateModel(
            name='Setting',
            fields=[
                ('key', models.CharField(max_length=100, primary_key=True, serialize=False, verbose_name='Key')),
                ('value', models.CharField(max_length=255, verbose_name='Value')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Last Updated')),
            ],
            options={
                'verbose_name': 'Setting',
                'verbose_name_plural': 'Settings',
                'db_table': 'settings',
                'ordering': ['key'],
            },
        ),
        migrations.CreateModel(
            name='Voter',
            fields=[
                ('id', models.CharField(max_length=255, primary_key=True, serialize=False, verbose_name='User ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='First Vote')),
            ],
            options={
                'verbose_name': 'User',
                'verbose_name_plural': 'Users',
                'db_table': 'users',
            },
        ),
        migrations.CreateModel(
            name='Nominee',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255, verbose_name='Name')),
                ('image_url', models.URLField(blank=True, max_length=500, null=True, verbose_name='Image URL')),
                ('position', models.IntegerField(default=0, help_text='Display order within the nomination (lower = first)', verbose_name='Position')),
                ('nomination', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='nominees', to='voting.nomination', verbose_name='Nomination')),
            ],
            options={
                'verbose_name': 'Nominee',
                'verbose_name_plural': 'Nominees',
                'db_table': 'nominees',
                'ordering': ['position', 'id'],
                'indexes': [models.Index(fields=['nomination', 'position'], name='nominees_nom_pos_idx')],
            },
        ),
        migrations.CreateModel(
            name='Vote',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Cast At')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Last Changed')),
                ('nomination', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='votes', to='voting.nomination', verbose_name='Nomination')),
                ('nominee', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='votes', to='voting.nominee', verbose_name='Nominee')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='votes', to='voting.voter', verbose_name='User')),
            ],
            options={
                'verbose_name': 'Vote',
                'verbose_name_plural': 'Votes',
                'db_table': 'votes',
                'indexes': [models.Index(fields=['nomination', 'nominee'], name='votes_nom_nominee_idx')],
                'unique_together': {('user', 'nomination')},
            },
        ),
    ]
