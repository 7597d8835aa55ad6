from django.conf import settings
from django.conf.urls.static import static
from django.urls import include, path

urlpatterns = [
    path("", include("modules.core.urls")),
    # Domain modules
    path("", include("modules.products.urls")),
    path("", include("modules.brands.urls")),
    path("", include("modules.categories.urls")),
    path("", include("modules.users.urls")),
] + static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
