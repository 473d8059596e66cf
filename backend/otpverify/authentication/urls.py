from django.urls import path

from .views import LoginView, OtpAjaxView, RegisterView

urlpatterns = [
    path("otp/", OtpAjaxView.as_view()),  # GET 부트스트랩 / POST send_otp, verify_otp
    path("login/", LoginView.as_view()),
    path("register/", RegisterView.as_view()),
    path("otp", OtpAjaxView.as_view()),
    path("login", LoginView.as_view()),
    path("register", RegisterView.as_view()),
]
