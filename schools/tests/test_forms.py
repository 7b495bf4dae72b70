from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import TestCase, override_settings

from schools.forms import SchoolForm
from schools.tests.utils import make_image_file, school_data


class TestSchoolForm(TestCase):

    def form(self, data=None, image=None):
        files = {'image': image if image is not None else make_image_file()}
        return SchoolForm(data if data is not None else school_data(), files)

    def test_valid(self):
        form = self.form()
        self.assertTrue(form.is_valid(), form.errors)
        self.assertEqual(form.missing_fields(), [])

    def test_all_fields_required(self):
        form = SchoolForm({}, {})
        self.assertFalse(form.is_valid())
        self.assertEqual(
            set(form.missing_fields()),
            {'name', 'address', 'city', 'state', 'contact', 'email_id', 'image'},
        )
        self.assertEqual(form.errors['name'], ["School name is required"])
        self.assertEqual(form.errors['image'], ["Image is required"])

    def test_whitespace_only_is_missing(self):
        form = self.form(school_data(city='   '))
        self.assertFalse(form.is_valid())
        self.assertEqual(form.missing_fields(), ['city'])

    def test_invalid_email(self):
        form = self.form(school_data(email_id='not-an-email'))
        self.assertFalse(form.is_valid())
        self.assertEqual(form.errors['email_id'], ["Invalid email format"])
        self.assertEqual(form.missing_fields(), [])
        self.assertEqual(form.first_error(), "Invalid email format")

    def test_invalid_contact(self):
        for contact in [
            '12345',
            'call me now',
            '98765-4321x',
            '1234567890123456',
            # Arabic-Indic digits
            '\u0669\u0668\u0667\u0666\u0665\u0664\u0663\u0662\u0661\u0660',
            '\u00b9\u00b2\u00b3' * 4,
        ]:
            with self.subTest(contact=contact):
                form = self.form(school_data(contact=contact))
                self.assertFalse(form.is_valid())
                self.assertEqual(form.errors['contact'], ["Invalid contact number"])

    def test_contact_separators_removed(self):
        for contact, expected in [
            ('(555) 123-4567', '5551234567'),
            ('+91 98765 43210', '+919876543210'),
            ('555.123.4567', '5551234567'),
            ('+91 - 98765 - 43210 - 12', '+91987654321012'),
        ]:
            with self.subTest(contact=contact):
                form = self.form(school_data(contact=contact))
                self.assertTrue(form.is_valid(), form.errors)
                self.assertEqual(form.cleaned_data['contact'], expected)

    def test_accepts_gif(self):
        form = self.form(image=make_image_file('campus.gif', image_format='GIF', content_type='image/gif'))
        self.assertTrue(form.is_valid(), form.errors)

    def test_rejects_non_image(self):
        fake = SimpleUploadedFile('school.png', b'definitely not an image', content_type='image/png')
        form = self.form(image=fake)
        self.assertFalse(form.is_valid())
        self.assertTrue(form.has_error('image', 'invalid_image'))

    def test_rejects_other_image_types(self):
        form = self.form(image=make_image_file('school.bmp', image_format='BMP', content_type='image/bmp'))
        self.assertFalse(form.is_valid())
        self.assertTrue(form.has_error('image', 'invalid_extension'))

    @override_settings(SCHOOL_IMAGE_MAX_SIZE=50)
    def test_rejects_large_image(self):
        form = self.form(image=make_image_file(size=(200, 200)))
        self.assertFalse(form.is_valid())
        self.assertTrue(form.has_error('image', 'file_too_large'))
