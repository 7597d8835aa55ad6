"""Product URL configuration."""

from __future__ import annotations

from modules.products.views import ProductController

app_name = "products"

urlpatterns = ProductController.urlpatterns()
