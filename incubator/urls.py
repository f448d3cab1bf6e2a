from django.contrib import admin
from django.urls import path, include
from core.views import home, admin_overview

urlpatterns = [
    path('admin/', admin.site.urls),
    path('', home, name='home'),
    path('dashboard/overview/', admin_overview, name='admin_overview'),
    path('core/', include('core.urls')),
    path('programs/', include('programs.urls')),
    path('applications/', include('applications.urls')),
]
