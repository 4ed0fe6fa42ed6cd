import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('catalog', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Consultation',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('read', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('name', models.CharField(max_length=120)),
                ('phone', models.CharField(max_length=20)),
                ('date', models.DateField(help_text='Preferred consultation date')),
                ('time', models.CharField(blank=True, help_text='Preferred time slot', max_length=20)),
                ('interest', models.CharField(help_text='Course category of interest', max_length=200)),
                ('selected_program', models.CharField(blank=True, max_length=200)),
                ('last_attended_course', models.CharField(blank=True, max_length=200)),
                ('percentage', models.CharField(blank=True, max_length=20)),
                ('comment', models.TextField(blank=True)),
            ],
            options={
                'ordering': ['-created_at'],
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='Inquiry',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('read', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('name', models.CharField(max_length=120)),
                ('phone', models.CharField(max_length=20)),
                ('subject', models.CharField(choices=[('B.Sc. Nursing Admissions', 'B.Sc. Nursing Admissions'), ('GNM Diploma Programs', 'GNM Diploma Programs'), ('International IT & Eng', 'International IT & Eng'), ('General Inquiry', 'General Inquiry')], default='B.Sc. Nursing Admissions', max_length=100)),
                ('message', models.TextField()),
            ],
            options={
                'verbose_name_plural': 'inquiries',
                'ordering': ['-created_at'],
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='Lead',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('read', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('kind', models.CharField(choices=[('college', 'College'), ('university', 'University')], max_length=20)),
                ('target_name', models.CharField(max_length=200)),
                ('student_name', models.CharField(max_length=200)),
                ('student_email', models.EmailField(blank=True, max_length=254)),
                ('student_phone', models.CharField(max_length=20)),
                ('student_location', models.CharField(blank=True, max_length=200)),
                ('last_attended_course', models.CharField(blank=True, max_length=200)),
                ('percentage', models.CharField(blank=True, max_length=20)),
                ('college', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='leads', to='catalog.college')),
                ('university', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='leads', to='catalog.university')),
                ('student', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='leads', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ['-created_at'],
                'abstract': False,
            },
        ),
    ]
