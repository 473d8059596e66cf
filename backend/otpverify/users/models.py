# otpverify/users/models.py
from django.contrib.auth.models import AbstractUser
from django.contrib.auth.models import UserManager as DjangoUserManager
from django.db import models


class UserManager(DjangoUserManager):
    use_in_migrations = True

    def phone_in_use(self, phone_number) -> bool:
        if not phone_number:
            return False
        return self.filter(phone_number=phone_number).exists()


class User(AbstractUser):
    # 프로필 전화번호 ("+91" + 10자리)
    phone_number = models.CharField(max_length=20, blank=True, default="", db_index=True)
    is_phone_verified = models.BooleanField(default=False)

    objects = UserManager()

    def __str__(self):
        return f"{self.id} {self.username}"
