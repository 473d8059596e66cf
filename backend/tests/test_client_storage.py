import json

from otpverify.client import JsonFileStore, MemoryStore


def test_memory_store_keeps_strings():
    store = MemoryStore()

    store.set("otp_verified_login", True)
    assert store.get("otp_verified_login") == "True"

    store.remove("otp_verified_login")
    store.remove("never-set")
    assert store.get("otp_verified_login") is None


def test_json_store_survives_restart(tmp_path):
    path = tmp_path / "state" / "otp.json"

    JsonFileStore(path).set("phone_number_login", "+919760666886")

    assert json.loads(path.read_text(encoding="utf-8")) == {"phone_number_login": "+919760666886"}
    assert JsonFileStore(path).get("phone_number_login") == "+919760666886"


def test_json_store_remove_is_persisted(tmp_path):
    path = tmp_path / "otp.json"
    store = JsonFileStore(path)
    store.set("otp_verified_register", "true")

    store.remove("otp_verified_register")

    assert JsonFileStore(path).get("otp_verified_register") is None


def test_json_store_ignores_unreadable_file(tmp_path):
    path = tmp_path / "otp.json"
    path.write_text("{not json", encoding="utf-8")

    store = JsonFileStore(path)

    assert store.get("otp_verified_login") is None
    store.set("otp_verified_login", "true")
    assert JsonFileStore(path).get("otp_verified_login") == "true"
