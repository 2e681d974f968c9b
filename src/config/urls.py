from django.urls import include, path

urlpatterns = [
    path("", include("modules.core.urls")),
    # Versioned customer API
    path("api/v1/", include("modules.customers.urls")),
]
