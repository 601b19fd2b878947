from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import clean_rut, require_pin
from ..core.constants import KIOSK_LOGIN_DOMAIN
from ..core.exceptions import AuthenticationError, ValidationError
from .repository import KioskCredentialRepository


def kiosk_login_for(rut: str) -> str:
    """Clock-in login derived from the RUT, e.g. 12345678-9@sistema.local."""
    cleaned = clean_rut(rut)
    if not cleaned:
        raise ValidationError("El RUT es obligatorio para crear el acceso")
    return f"{cleaned}@{KIOSK_LOGIN_DOMAIN}"


class KioskProvisioner:
    """Use case: give an employee a PIN for the shared clock-in terminal."""

    def __init__(self, credentials: KioskCredentialRepository):
        self._credentials = credentials

    def provision(self, *, rut: str, pin: str, employee_id: int, full_name: str) -> str:
        login = kiosk_login_for(rut)
        pin = require_pin(pin)
        # Upsert by login; the employee keeps a single credential.
        self._credentials.upsert(
            login=login,
            employee_id=int(employee_id),
            pin_hash=generate_password_hash(pin),
            full_name=full_name,
        )
        return login

    def revoke(self, employee_id: int) -> int:
        return self._credentials.delete_for_employee(int(employee_id))

    def authenticate(self, *, rut: str, pin: str) -> int:
        cred = self._credentials.get_by_login(kiosk_login_for(rut))
        if not cred:
            raise AuthenticationError("RUT o PIN incorrecto")

        try:
            ok = check_password_hash(cred.pin_hash, (pin or "").strip())
        except ValueError:
            # e.g. placeholder or corrupted hashes
            ok = False

        if not ok:
            raise AuthenticationError("RUT o PIN incorrecto")
        return cred.employee_id
