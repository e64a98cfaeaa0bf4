from django.urls import path
from .views import ClientCaseView, ClientCaseBrowseView

urlpatterns = [
    path("", ClientCaseView.as_view(), name="client-cases"),
    path("browse/", ClientCaseBrowseView.as_view(), name="client-cases-browse"),
]
