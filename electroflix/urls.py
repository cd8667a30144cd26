from django.contrib import admin
from django.urls import include, path

from accounts import views as account_views

urlpatterns = [
    path("admin/", admin.site.urls),
    path("accounts/", include("accounts.urls")),
    path("account/", account_views.my_account, name="account"),
    path("", include("tickets.urls")),
    path("", include("shows.urls")),
]
