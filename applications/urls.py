from django.urls import path
from . import views

app_name = 'applications'

urlpatterns = [
    path('mine/', views.my_applications, name='mine'),
    path('<slug:family_slug>/<uuid:program_id>/', views.ApplicationListView.as_view(), name='list'),
    path('<slug:family_slug>/<uuid:program_id>/export/', views.ApplicationCSVExportView.as_view(), name='export'),
    path('<slug:family_slug>/<uuid:program_id>/apply/', views.ApplyView.as_view(), name='apply'),
    path('<slug:family_slug>/<uuid:program_id>/<uuid:application_id>/', views.ApplicationDetailView.as_view(), name='detail'),
    path('<slug:family_slug>/<uuid:program_id>/<uuid:application_id>/status/', views.ApplicationStatusView.as_view(), name='status'),
]
