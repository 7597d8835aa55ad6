"""Administrator URL configuration."""

from __future__ import annotations

from modules.users.views import UserController

app_name = "users"

urlpatterns = UserController.urlpatterns()
