"""Patient accounts with bcrypt password hashing and JSON file storage."""
import json
import logging
import os
import uuid
from datetime import datetime
from typing import Optional, Dict, Any, Tuple

import bcrypt

from src.infrastructure.auth.validators import validate_profile_number


logger = logging.getLogger(__name__)

# Profile fields that prefill the basic_info step for logged-in users
PROFILE_FIELDS = ("age", "gender", "height", "weight")


class UserManager:
    """Registers, authenticates and stores patient accounts."""

    def __init__(self, storage_path: str):
        """
        Args:
            storage_path: Path of the JSON file holding the accounts.
        """
        self.storage_path = storage_path
        self._ensure_storage_exists()

    def _ensure_storage_exists(self) -> None:
        storage_dir = os.path.dirname(self.storage_path)
        if storage_dir:
            os.makedirs(storage_dir, exist_ok=True)
        if not os.path.exists(self.storage_path) or os.path.getsize(self.storage_path) == 0:
            self._save_users({})

    def _load_users(self) -> Dict[str, Any]:
        try:
            with open(self.storage_path, 'r') as f:
                return json.load(f)
        except (FileNotFoundError, json.JSONDecodeError) as e:
            logger.warning("User store unreadable, starting empty: %s", e)
            return {}

    def _save_users(self, users: Dict[str, Any]) -> None:
        with open(self.storage_path, 'w') as f:
            json.dump(users, f, indent=2)

    @staticmethod
    def _hash_password(password: str) -> str:
        return bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt()).decode('utf-8')

    @staticmethod
    def _verify_password(password: str, hashed_password: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode('utf-8'), hashed_password.encode('utf-8'))
        except ValueError:
            # Malformed hash in the store
            return False

    @staticmethod
    def _public(user: Dict[str, Any]) -> Dict[str, Any]:
        """Account data safe to keep in the session (no password hash)."""
        data = {
            "id": user["id"],
            "firstname": user["firstname"],
            "lastname": user["lastname"],
            "email": user["email"],
            "name": f"{user['firstname']} {user['lastname']}".strip(),
        }
        for field in PROFILE_FIELDS:
            data[field] = user.get(field, "")
        return data

    def email_exists(self, email: str) -> bool:
        return email.strip().lower() in self._load_users()

    def register_user(
        self,
        firstname: str,
        lastname: str,
        email: str,
        password: str,
    ) -> Tuple[bool, str]:
        """
        Register a new patient account.

        Args:
            firstname: Patient's first name
            lastname: Patient's last name
            email: Login email, stored lower-cased
            password: Plain text password (will be hashed)

        Returns:
            Tuple of (success, message)
        """
        email = email.strip().lower()
        users = self._load_users()
        if email in users:
            return False, "Email already registered"

        users[email] = {
            "id": str(uuid.uuid4()),
            "firstname": firstname.strip(),
            "lastname": lastname.strip(),
            "email": email,
            "password": self._hash_password(password),
            "created_at": datetime.now().isoformat(),
            "last_login": None,
            **{field: "" for field in PROFILE_FIELDS},
        }

        try:
            self._save_users(users)
        except OSError as e:
            logger.exception("Failed to save user %s", email)
            return False, f"Failed to save user: {e}"
        return True, "Registration successful"

    def authenticate_user(self, email: str, password: str) -> Tuple[bool, Optional[Dict[str, Any]]]:
        """
        Returns:
            Tuple of (success, account data or None)
        """
        email = email.strip().lower()
        users = self._load_users()
        user = users.get(email)
        if user is None or not self._verify_password(password, user["password"]):
            return False, None

        user["last_login"] = datetime.now().isoformat()
        self._save_users(users)
        return True, self._public(user)

    def get_user(self, email: str) -> Optional[Dict[str, Any]]:
        user = self._load_users().get(email.strip().lower())
        return self._public(user) if user else None

    def update_profile(self, email: str, **fields: Any) -> Tuple[bool, str]:
        """
        Save health profile fields (age, gender, height, weight) on the account.

        Returns:
            Tuple of (success, message)
        """
        unknown = set(fields) - set(PROFILE_FIELDS)
        if unknown:
            return False, f"Unknown profile fields: {', '.join(sorted(unknown))}"
        for field in ("age", "height", "weight"):
            if field in fields:
                valid, error = validate_profile_number(str(fields[field] or ""), field)
                if not valid:
                    return False, error

        email = email.strip().lower()
        users = self._load_users()
        if email not in users:
            return False, "User not found"
        users[email].update({k: "" if v is None else str(v) for k, v in fields.items()})
        self._save_users(users)
        return True, "Profile updated"
