from rest_framework.permissions import IsAuthenticated
from rest_framework.views import APIView

from otpverify.authentication.services import OtpRequestHandler
from otpverify.authentication.views import ok

from .serializers import UserMeSerializer


class MeView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        serializer = UserMeSerializer(request.user)
        return ok(serializer.data)

    def patch(self, request):
        phone = request.data.get("phoneNumber") or request.data.get("phone_number")
        if phone:
            OtpRequestHandler.from_settings().on_account_fields_updated(request.user, phone)

        serializer = UserMeSerializer(request.user)
        return ok(serializer.data)
