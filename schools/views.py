import logging

from django.conf import settings
from django.contrib import messages
from django.http import JsonResponse
from django.shortcuts import render, redirect
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from .forms import SchoolForm
from .models import School
from .utils import init_database, save_school

logger = logging.getLogger(__name__)


def add_school(request):
    if request.method == 'POST':
        form = SchoolForm(request.POST, request.FILES)
        if form.is_valid():
            save_school(form)
            messages.success(request, 'School added successfully!')
            return redirect('schools:add_school')
        logger.warning("Rejected school form: %s", form.errors.as_json())
    else:
        form = SchoolForm()

    context = {
        'form': form,
        'title': 'Add New School',
        'max_image_size': settings.SCHOOL_IMAGE_MAX_SIZE,
    }
    return render(request, 'schools/add_school.html', context)


def show_schools(request):
    query = request.GET.get('q', '')
    city = request.GET.get('city', '')

    schools = School.objects.search(query).in_city(city)

    context = {
        'schools': schools,
        'cities': School.objects.cities(),
        'query': query,
        'city': city,
        'title': 'School Directory',
    }
    return render(request, 'schools/show_schools.html', context)


@csrf_exempt
@require_http_methods(['GET', 'POST'])
def schools_api(request):
    if request.method == 'POST':
        return _create_school_api(request)
    return _list_schools_api(request)


def _list_schools_api(request):
    try:
        schools = School.objects.search(request.GET.get('q')).in_city(request.GET.get('city'))
        return JsonResponse([school.to_dict() for school in schools], safe=False)
    except Exception:
        logger.exception("Error fetching schools")
        return JsonResponse({'error': 'Internal server error'}, status=500)


def _create_school_api(request):
    form = SchoolForm(request.POST, request.FILES)
    try:
        if not form.is_valid():
            if form.missing_fields():
                error = 'All fields are required'
            else:
                error = form.first_error()
            logger.warning("Rejected school submission: %s", error)
            return JsonResponse(
                {'error': error, 'errors': form.errors.get_json_data()},
                status=400,
            )

        school = save_school(form)
        return JsonResponse(
            {
                'message': 'School added successfully',
                'imageUrl': school.image_url,
                'school': school.to_dict(),
            },
            status=201,
        )
    except Exception:
        logger.exception("Error adding school")
        return JsonResponse({'error': 'Internal server error'}, status=500)


@csrf_exempt
@require_http_methods(['GET', 'POST'])
def init_db_api(request):
    try:
        init_database()
    except Exception as e:
        logger.exception("Database initialization error")
        return JsonResponse(
            {
                'success': False,
                'message': 'Failed to initialize database',
                'error': str(e) or e.__class__.__name__,
            },
            status=500,
        )
    return JsonResponse({
        'success': True,
        'message': 'Database initialized successfully',
    })
