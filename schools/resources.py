from django.conf import settings
from import_export import resources
from import_export.fields import Field

from .models import School


class SchoolResource(resources.ModelResource):
    # Exported as the public URL, imported as the stored path
    image = Field(column_name='image', attribute='image')

    class Meta:
        model = School
        fields = (
            'id',
            'name',
            'address',
            'city',
            'state',
            'contact',
            'email_id',
            'image',
            'created_at',
        )
        export_order = fields
        import_id_fields = ('id',)
        skip_unchanged = True
        report_skipped = True

    def dehydrate_image(self, school):
        return school.image_url

    def before_import_row(self, row, **kwargs):
        # Strip the media URL prefix so rows exported from here import cleanly
        image = (row.get('image') or '').strip()
        media_url = settings.MEDIA_URL
        if image.startswith(media_url):
            image = image[len(media_url):]
        row['image'] = image
