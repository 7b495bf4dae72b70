import factory
from factory.django import DjangoModelFactory

from schools.models import School


class SchoolFactory(DjangoModelFactory):
    class Meta:
        model = School

    name = factory.Sequence(lambda n: f"School {n}")
    address = factory.Faker('street_address')
    city = 'Springfield'
    state = 'IL'
    contact = factory.Sequence(lambda n: f"555{n:07d}")
    email_id = factory.LazyAttribute(lambda o: f"{o.name.lower().replace(' ', '.')}@example.edu")
    image = factory.django.ImageField(filename='school.png', format='PNG', width=20, height=20)
