import base64
import hashlib
from django.conf import settings
from cryptography.fernet import Fernet, InvalidToken


def _derive_key() -> bytes:
    if settings.LLM_ENCRYPTION_KEY:
        return settings.LLM_ENCRYPTION_KEY.encode()
    # Derive from SECRET_KEY when no explicit key is configured
    digest = hashlib.sha256(settings.SECRET_KEY.encode()).digest()
    return base64.urlsafe_b64encode(digest)


def get_fernet() -> Fernet:
    return Fernet(_derive_key())


def encrypt_value(value: str) -> str:
    if not value:
        return ''
    return get_fernet().encrypt(value.encode()).decode()


def decrypt_value(value: str) -> str:
    """Decrypt a stored secret; anything unreadable comes back as ''."""
    if not value:
        return ''
    try:
        return get_fernet().decrypt(value.encode()).decode()
    except InvalidToken:
        return ''


def mask_secret(value: str) -> str:
    if not value:
        return ''
    if len(value) <= 8:
        return '…'
    return value[:4] + '…' + value[-4:]
