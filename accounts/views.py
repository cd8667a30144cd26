from django.contrib.auth import views as auth_views, login
from django.contrib.auth.decorators import login_required
from django.shortcuts import render, redirect, resolve_url
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.generic import FormView
import logging

from .forms import EmailAuthenticationForm, SignupForm

logger = logging.getLogger(__name__)


def _safe_next(request):
    nxt = request.POST.get("next") or request.GET.get("next") or ""
    if nxt and url_has_allowed_host_and_scheme(nxt, allowed_hosts={request.get_host()},
                                               require_https=request.is_secure()):
        return nxt
    return ""


class LoginViewCustom(auth_views.LoginView):
    template_name = "accounts/login.html"
    authentication_form = EmailAuthenticationForm
    redirect_authenticated_user = True

    def get_success_url(self):
        # honor explicit ?next=, otherwise home
        return self.get_redirect_url() or resolve_url("shows:home")


class SignupView(FormView):
    template_name = "accounts/signup.html"
    form_class = SignupForm

    def dispatch(self, request, *args, **kwargs):
        if request.user.is_authenticated:
            return redirect(_safe_next(request) or "shows:home")
        return super().dispatch(request, *args, **kwargs)

    def form_valid(self, form):
        user = form.save()
        login(self.request, user, backend="django.contrib.auth.backends.ModelBackend")
        logger.info("New account %s", user.pk)
        return redirect(_safe_next(self.request) or "shows:home")

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)
        ctx["next"] = _safe_next(self.request)
        return ctx


class LogoutViewCustom(auth_views.LogoutView):
    next_page = "shows:home"


@login_required
def my_account(request):
    tickets = request.user.tickets.select_related("show").order_by("-purchase_date")
    return render(request, "accounts/account.html", {"tickets": tickets})
