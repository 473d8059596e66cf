# otpverify/config/urls.py
from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/auth/", include("otpverify.authentication.urls")),
    path("api/users/", include("otpverify.users.urls")),
]
