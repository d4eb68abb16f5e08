from clinic.extensions import db
from clinic.models.admin_credential import AdminCredential
from clinic.domain.invariants.exceptions import ValidationError
from clinic.utils.transaction import transactional


def create_admin(*, username: str, password: str) -> AdminCredential:
    """
    Store (or reset) an admin credential with a salted password hash.
    """
    if not username or not password:
        raise ValidationError("Username and password are required")

    credential = AdminCredential.query.filter_by(username=username).first()

    with transactional():
        if credential is None:
            credential = AdminCredential()
            credential.username = username
            db.session.add(credential)
        credential.set_password(password)

    return credential
