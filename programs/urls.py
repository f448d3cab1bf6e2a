from django.urls import path
from . import views

app_name = 'programs'

urlpatterns = [
    path('public/<slug:family_slug>/', views.public_program_list, name='public_list'),
    path('public/<slug:family_slug>/<uuid:external_id>/', views.public_program_detail, name='public_detail'),
    path('<slug:family_slug>/', views.ProgramListView.as_view(), name='list'),
    path('<slug:family_slug>/create/', views.ProgramSaveView.as_view(), name='create'),
    path('<slug:family_slug>/<uuid:external_id>/', views.ProgramDetailView.as_view(), name='detail'),
    path('<slug:family_slug>/<uuid:external_id>/edit/', views.ProgramSaveView.as_view(), name='edit'),
    path('<slug:family_slug>/<uuid:external_id>/delete/', views.ProgramDeleteView.as_view(), name='delete'),
]
