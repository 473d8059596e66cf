from django.apps import AppConfig


class CommonConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "otpverify.common"
    label = "common"

    def ready(self):
        from . import checks  # noqa: F401
