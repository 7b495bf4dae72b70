from django.shortcuts import render

from schools.models import School


# Public landing page with links to the form and the directory
def home(request):
    context = {
        'school_count': School.objects.count(),
        'city_count': len(School.objects.cities()),
    }
    return render(request, 'home.html', context)
