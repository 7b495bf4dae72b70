import os

from django.core.validators import RegexValidator
from django.db import models
from django.db.models import Q
from django.utils import timezone
from django.utils.text import get_valid_filename

SCHOOL_IMAGE_DIR = 'schoolImages'

contact_validator = RegexValidator(
    regex=r'^\+?[0-9]{10,15}$',
    message="Invalid contact number",
    code='invalid_contact',
)


def school_image_path(instance, filename):
    """Store uploads as schoolImages/<epoch-ms>_<original name>."""
    name = get_valid_filename(os.path.basename(filename))
    stamp = int(timezone.now().timestamp() * 1000)
    return f"{SCHOOL_IMAGE_DIR}/{stamp}_{name}"


class SchoolQuerySet(models.QuerySet):

    def search(self, term):
        term = (term or '').strip()
        if not term:
            return self
        return self.filter(Q(name__icontains=term) | Q(city__icontains=term))

    def in_city(self, city):
        city = (city or '').strip()
        if not city:
            return self
        return self.filter(city__iexact=city)

    def cities(self):
        return list(self.order_by('city').values_list('city', flat=True).distinct())


class School(models.Model):
    name = models.CharField(max_length=200, verbose_name="School Name")
    address = models.TextField(verbose_name="Complete Address")
    city = models.CharField(max_length=100, verbose_name="City")
    state = models.CharField(max_length=100, verbose_name="State")
    contact = models.CharField(
        max_length=20,
        validators=[contact_validator],
        verbose_name="Contact Number",
        help_text="10 to 15 digits, optionally starting with +"
    )
    image = models.ImageField(upload_to=school_image_path, max_length=255, verbose_name="School Image")
    email_id = models.EmailField(max_length=255, verbose_name="Email Address")
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    objects = SchoolQuerySet.as_manager()

    class Meta:
        db_table = 'schools'
        ordering = ['-created_at', '-id']
        verbose_name = "School"
        verbose_name_plural = "Schools"

    def __str__(self):
        return f"{self.name} ({self.city})"

    @property
    def image_url(self):
        return self.image.url if self.image else ''

    def to_dict(self):
        return {
            'id': self.pk,
            'name': self.name,
            'address': self.address,
            'city': self.city,
            'state': self.state,
            'contact': self.contact,
            'image': self.image_url,
            'email_id': self.email_id,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }
