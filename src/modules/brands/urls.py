"""Brand URL configuration."""

from __future__ import annotations

from modules.brands.views import BrandController

app_name = "brands"

urlpatterns = BrandController.urlpatterns()
