from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import path, include

from . import views

admin.site.site_header = "School Registry Administration"
admin.site.site_title = "School Registry Administration"

urlpatterns = [
    path('admin/', admin.site.urls),

    # Public home page
    path('', views.home, name='home'),

    # Apps
    path('', include('schools.urls')),
]

if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
