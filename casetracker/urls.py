from django.urls import path, include

urlpatterns = [
    path('api/auth/', include('authapi.urls')),
    path('api/client-cases/', include('cases.urls')),
    path('api/case-notes/', include('notes.urls')),
]
