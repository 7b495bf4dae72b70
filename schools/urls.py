from django.urls import path
from . import views

app_name = 'schools'

urlpatterns = [
    # Pages
    path('addSchool/', views.add_school, name='add_school'),
    path('showSchools/', views.show_schools, name='show_schools'),

    # JSON API
    path('api/schools', views.schools_api, name='api_schools'),
    path('api/init-db', views.init_db_api, name='api_init_db'),
]
