import logging
from io import BytesIO

from django.core.files.base import ContentFile
from django.core.management import call_command
from django.db import transaction
from PIL import Image, ImageDraw

from .models import SCHOOL_IMAGE_DIR, School

logger = logging.getLogger(__name__)

SAMPLE_SCHOOLS = [
    {
        'name': 'Sunshine Elementary School',
        'address': '123 Sunshine Street',
        'city': 'Springfield',
        'state': 'IL',
        'contact': '5551234567',
        'email_id': 'info@sunshine-elem.edu',
        'color': (250, 204, 21),
    },
    {
        'name': 'Riverside High School',
        'address': '456 River Road',
        'city': 'Springfield',
        'state': 'IL',
        'contact': '5559876543',
        'email_id': 'contact@riverside-hs.edu',
        'color': (37, 99, 235),
    },
]


def init_database(verbosity=0):
    """Apply pending migrations, creating the schools table when it is missing."""
    call_command('migrate', interactive=False, verbosity=verbosity)
    logger.info("Database and table initialized successfully")


def discard_image(school):
    # Only files already written under the upload dir belong to us
    name = school.image.name or ''
    if name.startswith(SCHOOL_IMAGE_DIR + '/'):
        school.image.delete(save=False)
        logger.info("Removed orphaned image %s", name)


def save_school(form):
    """Save a validated SchoolForm, removing the stored image if the insert fails."""
    try:
        with transaction.atomic():
            school = form.save()
    except Exception:
        discard_image(form.instance)
        raise
    logger.info("Added school %s (id=%s) with image %s", school.name, school.pk, school.image.name)
    return school


def placeholder_image(text, color, size=(640, 360)):
    image = Image.new('RGB', size, color)
    draw = ImageDraw.Draw(image)
    draw.text((24, size[1] // 2), text, fill=(255, 255, 255))
    buffer = BytesIO()
    image.save(buffer, format='PNG')
    return ContentFile(buffer.getvalue())


def seed_sample_schools():
    """
    Insert the sample schools when the table is empty.

    All rows go in together. On failure nothing is inserted and every image
    written so far is removed, so a later run can seed again.

    Returns the number of schools created, 0 when the table already had data.
    """
    if School.objects.exists():
        return 0

    schools = []
    try:
        with transaction.atomic():
            for number, data in enumerate(SAMPLE_SCHOOLS, start=1):
                fields = {key: value for key, value in data.items() if key != 'color'}
                school = School(**fields)
                schools.append(school)
                school.image.save(f"sample-school-{number}.png",
                                  placeholder_image(school.name, data['color']), save=False)
                school.full_clean()
                school.save()
    except Exception:
        for school in schools:
            discard_image(school)
        raise
    return len(schools)
