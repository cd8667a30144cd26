from django.urls import path
from . import views

app_name = "accounts"

urlpatterns = [
    path("login/", views.LoginViewCustom.as_view(), name="login"),
    path("signup/", views.SignupView.as_view(), name="signup"),
    path("logout/", views.LogoutViewCustom.as_view(), name="logout"),
]
