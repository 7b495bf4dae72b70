import django.core.validators
from django.db import migrations, models

import schools.models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='School',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=200, verbose_name='School Name')),
                ('address', models.TextField(verbose_name='Complete Address')),
                ('city', models.CharField(max_length=100, verbose_name='City')),
                ('state', models.CharField(max_length=100, verbose_name='State')),
                ('contact', models.CharField(help_text='10 to 15 digits, optionally starting with +', max_length=20, validators=[django.core.validators.RegexValidator(code='invalid_contact', message='Invalid contact number', regex='^\\+?[0-9]{10,15}$')], verbose_name='Contact Number')),
                ('image', models.ImageField(max_length=255, upload_to=schools.models.school_image_path, verbose_name='School Image')),
                ('email_id', models.EmailField(max_length=255, verbose_name='Email Address')),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
            ],
            options={
                'verbose_name': 'School',
                'verbose_name_plural': 'Schools',
                'db_table': 'schools',
                'ordering': ['-created_at', '-id'],
            },
        ),
    ]
