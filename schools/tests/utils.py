import shutil
import tempfile
from io import BytesIO

from django.core.files.uploadedfile import SimpleUploadedFile
from PIL import Image


def make_image_file(name='school.png', image_format='PNG', size=(20, 20), content_type='image/png'):
    buffer = BytesIO()
    Image.new('RGB', size, (37, 99, 235)).save(buffer, format=image_format)
    return SimpleUploadedFile(name, buffer.getvalue(), content_type=content_type)


def school_data(**overrides):
    data = {
        'name': 'Sunrise Public School',
        'address': '12 Hill Road, Near City Park',
        'city': 'Pune',
        'state': 'Maharashtra',
        'contact': '9876543210',
        'email_id': 'office@sunrise.edu',
    }
    data.update(overrides)
    return data


class TempMediaMixin:
    """Point MEDIA_ROOT at a temporary directory for the duration of each test."""

    def setUp(self):
        super().setUp()
        self.media_root = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, self.media_root, ignore_errors=True)
        media_settings = self.settings(MEDIA_ROOT=self.media_root)
        media_settings.enable()
        self.addCleanup(media_settings.disable)
