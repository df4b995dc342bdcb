"""Unit tests for patient accounts."""
import json
import os
import tempfile

import pytest

from src.infrastructure.auth.user_manager import PROFILE_FIELDS, UserManager


@pytest.fixture
def temp_storage():
    """Temporary JSON file for the account store."""
    with tempfile.NamedTemporaryFile(mode='w', delete=False, suffix='.json') as f:
        temp_path = f.name

    yield temp_path

    if os.path.exists(temp_path):
        os.unlink(temp_path)


@pytest.fixture
def manager(temp_storage):
    manager = UserManager(storage_path=temp_storage)
    manager.register_user(firstname="Mei", lastname="Tan", email="mei.tan@example.com", password="Herbal#2024")
    return manager


class TestRegistration:

    def test_empty_store_created(self, temp_storage):
        UserManager(storage_path=temp_storage)
        with open(temp_storage) as f:
            assert json.load(f) == {}

    def test_nested_directory_created(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "data", "users.json")
            UserManager(storage_path=path)
            assert os.path.exists(path)

    def test_register_stores_hashed_password_and_empty_profile(self, manager, temp_storage):
        with open(temp_storage) as f:
            user = json.load(f)["mei.tan@example.com"]

        assert user["firstname"] == "Mei"
        assert user["password"] != "Herbal#2024"
        assert user["password"].startswith("$2b$")
        assert user["id"]
        assert all(user[field] == "" for field in PROFILE_FIELDS)

    def test_duplicate_email_any_case(self, manager):
        success, message = manager.register_user(
            firstname="Mei", lastname="Lin", email="MEI.TAN@example.com", password="Herbal#2024"
        )
        assert not success
        assert "already registered" in message.lower()

    def test_chinese_name(self, manager):
        success, _ = manager.register_user(
            firstname="美", lastname="陈", email="chen@example.com", password="Herbal#2024"
        )
        assert success
        assert manager.get_user("chen@example.com")["name"] == "美 陈"

    def test_email_exists(self, manager):
        assert manager.email_exists(" Mei.Tan@Example.com ")
        assert not manager.email_exists("someone@example.com")


class TestAuthentication:

    def test_login_returns_public_data(self, manager):
        success, user = manager.authenticate_user("mei.tan@example.com", "Herbal#2024")
        assert success
        assert user["name"] == "Mei Tan"
        assert user["email"] == "mei.tan@example.com"
        assert "password" not in user

    def test_wrong_password(self, manager):
        assert manager.authenticate_user("mei.tan@example.com", "herbal#2024") == (False, None)

    def test_unknown_user(self, manager):
        assert manager.authenticate_user("nobody@example.com", "Herbal#2024") == (False, None)

    def test_last_login_recorded(self, manager, temp_storage):
        manager.authenticate_user("mei.tan@example.com", "Herbal#2024")
        with open(temp_storage) as f:
            assert json.load(f)["mei.tan@example.com"]["last_login"] is not None

    def test_corrupt_hash_is_rejected(self, manager, temp_storage):
        with open(temp_storage) as f:
            users = json.load(f)
        users["mei.tan@example.com"]["password"] = "not-a-hash"
        with open(temp_storage, 'w') as f:
            json.dump(users, f)
        assert manager.authenticate_user("mei.tan@example.com", "Herbal#2024") == (False, None)

    def test_unreadable_store_treated_as_empty(self, manager, temp_storage):
        with open(temp_storage, 'w') as f:
            f.write("{broken")
        assert manager.get_user("mei.tan@example.com") is None


class TestProfile:

    def test_update_profile(self, manager):
        success, _ = manager.update_profile("mei.tan@example.com", age="34", gender="female", height="160.5", weight=52)
        assert success
        user = manager.get_user("mei.tan@example.com")
        assert (user["age"], user["gender"], user["height"], user["weight"]) == ("34", "female", "160.5", "52")

    def test_profile_returned_on_login(self, manager):
        manager.update_profile("mei.tan@example.com", age="34")
        _, user = manager.authenticate_user("mei.tan@example.com", "Herbal#2024")
        assert user["age"] == "34"

    def test_invalid_number_rejected(self, manager):
        success, message = manager.update_profile("mei.tan@example.com", age="thirty")
        assert not success
        assert "must be a number" in message

    def test_out_of_range_rejected(self, manager):
        success, message = manager.update_profile("mei.tan@example.com", height="900")
        assert not success
        assert "between" in message

    def test_unknown_field_rejected(self, manager):
        success, message = manager.update_profile("mei.tan@example.com", blood_type="O")
        assert not success
        assert "blood_type" in message

    def test_unknown_user(self, manager):
        assert manager.update_profile("nobody@example.com", age="30") == (False, "User not found")
