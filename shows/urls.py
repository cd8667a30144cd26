from django.urls import path
from . import views

app_name = "shows"

urlpatterns = [
    path("", views.home, name="home"),
    path("show/<int:pk>/", views.show_detail, name="detail"),
]
