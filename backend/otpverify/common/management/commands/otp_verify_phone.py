# otpverify/common/management/commands/otp_verify_phone.py
import requests
from django.core.management.base import BaseCommand, CommandError

from otpverify.authentication.session import FORM_TYPES, LOGIN
from otpverify.client import FormController, JsonFileStore, MemoryStore


class Command(BaseCommand):
    help = "Verify a phone number with MSG91 OTP against a running server, the way the login/register form does"

    def add_arguments(self, parser):
        parser.add_argument("--server", default="http://127.0.0.1:8000")
        parser.add_argument("--form-type", choices=FORM_TYPES, default=LOGIN)
        parser.add_argument(
            "--store",
            default=None,
            help="JSON file that remembers a successful verification between runs",
        )
        parser.add_argument("--phone", default=None, help="10-digit phone number")
        parser.add_argument("--forget", action="store_true", help="Drop a remembered verification first")

    def handle(self, *args, **options):
        store = JsonFileStore(options["store"]) if options["store"] else MemoryStore()

        try:
            controller = FormController.connect(options["server"], options["form_type"], store)
        except (requests.RequestException, ValueError) as e:
            raise CommandError(f"Could not reach {options['server']}: {e}")

        if options["forget"]:
            controller.forget_verification()
        elif controller.restore_verification():
            self.stdout.write(
                self.style.SUCCESS(f"+91{controller.form.phone} is already verified on this machine.")
            )
            return

        phone = options["phone"] or input("Phone number (10-digit): ")
        result = controller.send_otp(phone)
        if not result.success:
            raise CommandError(result.message)
        self.stdout.write(self.style.SUCCESS(result.message))

        code = input("OTP code: ")
        result = controller.verify_otp(phone, code)
        if not result.success:
            raise CommandError(result.message)
        self.stdout.write(self.style.SUCCESS(result.message))
