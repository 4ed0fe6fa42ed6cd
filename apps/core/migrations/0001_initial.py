import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='SiteSettings',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('hero_title', models.CharField(default='Welcome to Fortex Education', max_length=200)),
                ('hero_subtitle', models.CharField(blank=True, default='Admissions guidance for nursing, allied health, engineering and beyond.', max_length=300)),
                ('about_title', models.CharField(blank=True, default='About Us', max_length=200)),
                ('about_description', models.TextField(blank=True)),
                ('about_image_url', models.URLField(blank=True)),
                ('contact_email', models.EmailField(default='info@fortexeducation.com', max_length=254)),
                ('contact_phone', models.CharField(blank=True, default='+91 70253 37762', max_length=30)),
                ('address', models.TextField(blank=True, default='Kalpetta, Wayanad, Kerala 673121')),
                ('whatsapp_number', models.CharField(blank=True, default='917025337762', help_text='Digits only, with country code (used for the wa.me link)', max_length=20)),
                ('instagram', models.URLField(blank=True)),
                ('facebook', models.URLField(blank=True)),
                ('linkedin', models.URLField(blank=True)),
                ('twitter', models.URLField(blank=True)),
                ('youtube_url', models.URLField(blank=True, help_text='Channel link for the video gallery')),
                ('theme_color', models.CharField(blank=True, max_length=20)),
                ('logo_url', models.URLField(blank=True, help_text='External URL to logo image')),
                ('visible_sections', models.JSONField(blank=True, default=dict)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Site settings',
                'verbose_name_plural': 'Site settings',
            },
        ),
        migrations.CreateModel(
            name='TeamMember',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=120)),
                ('role', models.CharField(max_length=120)),
                ('image_url', models.URLField(blank=True)),
                ('bio', models.TextField(blank=True)),
                ('linkedin', models.URLField(blank=True)),
                ('twitter', models.URLField(blank=True)),
                ('instagram', models.URLField(blank=True)),
                ('order', models.PositiveIntegerField(default=0)),
            ],
            options={
                'ordering': ['order', 'name'],
            },
        ),
        migrations.CreateModel(
            name='LLMConfig',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('encrypted_api_key', models.TextField(blank=True, help_text='Encrypted OpenAI API key')),
                ('active_model', models.CharField(default='gpt-4o-mini', max_length=100)),
                ('system_prompt', models.TextField(blank=True, help_text='Leave blank to use the default counsellor prompt')),
                ('temperature', models.DecimalField(decimal_places=2, default=0.7, max_digits=3)),
                ('max_output_tokens', models.PositiveIntegerField(default=600)),
                ('monthly_token_cap', models.PositiveIntegerField(default=0, help_text='0 means no cap')),
                ('generation_enabled', models.BooleanField(default=True)),
                ('auto_disable_on_cap', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
        ),
        migrations.CreateModel(
            name='LLMUsageLog',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('request_type', models.CharField(default='career_advice', max_length=50)),
                ('model_name', models.CharField(max_length=100)),
                ('user_message', models.TextField(blank=True)),
                ('response_text', models.TextField(blank=True)),
                ('prompt_tokens', models.PositiveIntegerField(default=0)),
                ('completion_tokens', models.PositiveIntegerField(default=0)),
                ('total_tokens', models.PositiveIntegerField(default=0)),
                ('cost_input', models.DecimalField(decimal_places=6, default=0, max_digits=10)),
                ('cost_output', models.DecimalField(decimal_places=6, default=0, max_digits=10)),
                ('cost_total', models.DecimalField(decimal_places=6, default=0, max_digits=10)),
                ('latency_ms', models.PositiveIntegerField(default=0)),
                ('success', models.BooleanField(default=True)),
                ('error_message', models.TextField(blank=True)),
                ('session_key', models.CharField(blank=True, max_length=40)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('actor', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ['-created_at'],
            },
        ),
    ]
