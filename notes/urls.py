from django.urls import path
from .views import CaseNoteListCreateView

urlpatterns = [
    path("", CaseNoteListCreateView.as_view(), name="case-notes"),
]
