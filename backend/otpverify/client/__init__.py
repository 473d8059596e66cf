from .controller import BUSY, FormController, Result
from .form import Banner, Button, OtpForm
from .storage import JsonFileStore, MemoryStore
from .transport import OtpTransport

__all__ = [
    "BUSY",
    "Banner",
    "Button",
    "FormController",
    "JsonFileStore",
    "MemoryStore",
    "OtpForm",
    "OtpTransport",
    "Result",
]
