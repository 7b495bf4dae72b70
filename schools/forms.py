import os
import re

from django import forms
from django.conf import settings
from django.template.defaultfilters import filesizeformat

from .models import School

ALLOWED_IMAGE_EXTENSIONS = ('jpg', 'jpeg', 'png', 'gif')

# Characters people type between digits of a phone number
CONTACT_SEPARATORS = re.compile(r'[\s\-().]')


class SchoolForm(forms.ModelForm):
    # Raw input may carry separators; the stored value is bounded by the model
    contact = forms.CharField(
        max_length=40,
        label="Contact Number",
        help_text=School._meta.get_field('contact').help_text,
        widget=forms.TextInput(attrs={
            'type': 'tel',
            'placeholder': 'Enter contact number (10+ digits)',
        }),
        error_messages={'required': "Contact number is required"},
    )

    class Meta:
        model = School
        fields = [
            'name',
            'address',
            'city',
            'state',
            'contact',
            'email_id',
            'image',
        ]
        widgets = {
            'name': forms.TextInput(attrs={'placeholder': 'Enter school name'}),
            'address': forms.Textarea(attrs={
                'rows': 4,
                'placeholder': 'Enter complete address with street, area, and landmarks',
            }),
            'city': forms.TextInput(attrs={'placeholder': 'Enter city name'}),
            'state': forms.TextInput(attrs={'placeholder': 'Enter state name'}),
            'email_id': forms.EmailInput(attrs={'placeholder': 'Enter email address'}),
            'image': forms.ClearableFileInput(attrs={'accept': 'image/*'}),
        }
        error_messages = {
            'name': {'required': "School name is required"},
            'address': {'required': "Address is required"},
            'city': {'required': "City is required"},
            'state': {'required': "State is required"},
            'email_id': {
                'required': "Email is required",
                'invalid': "Invalid email format",
            },
            'image': {'required': "Image is required"},
        }

    def clean_contact(self):
        contact = CONTACT_SEPARATORS.sub('', self.cleaned_data['contact'])
        digits = contact[1:] if contact.startswith('+') else contact
        if not re.fullmatch(r'[0-9]+', digits) or not 10 <= len(digits) <= 15:
            raise forms.ValidationError("Invalid contact number", code='invalid_contact')
        return contact

    def clean_image(self):
        image = self.cleaned_data['image']
        extension = os.path.splitext(image.name)[1].lstrip('.').lower()
        if extension not in ALLOWED_IMAGE_EXTENSIONS:
            raise forms.ValidationError(
                "Unsupported image type. Accepted formats: JPG, PNG, GIF",
                code='invalid_extension',
            )
        max_size = settings.SCHOOL_IMAGE_MAX_SIZE
        if image.size > max_size:
            raise forms.ValidationError(
                f"Image is too large. Max size: {filesizeformat(max_size)}",
                code='file_too_large',
            )
        return image

    def missing_fields(self):
        """Names of required fields that were left empty."""
        return [
            field for field, errors in self.errors.as_data().items()
            if any(error.code == 'required' for error in errors)
        ]

    def first_error(self):
        for errors in self.errors.values():
            if errors:
                return errors[0]
        return ''
