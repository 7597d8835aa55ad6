"""Category URL configuration."""

from __future__ import annotations

from modules.categories.views import CategoryController

app_name = "categories"

urlpatterns = CategoryController.urlpatterns()
