# otpverify/users/serializers.py
from rest_framework import serializers

from .models import User


class UserMeSerializer(serializers.ModelSerializer):
    userId = serializers.IntegerField(source="id", read_only=True)
    phoneNumber = serializers.CharField(source="phone_number", read_only=True)
    isPhoneVerified = serializers.BooleanField(source="is_phone_verified", read_only=True)
    dateJoined = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = [
            "userId",
            "username",
            "email",
            "phoneNumber",
            "isPhoneVerified",
            "dateJoined",
        ]

    def get_dateJoined(self, obj: User):
        return obj.date_joined.isoformat() if obj.date_joined else None
