"""Staff accounts: creating admins and checking their credentials."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Boolean, String
from protean.utils.globals import current_domain

from backoffice.admin.admin_user import AdminUser
from backoffice.domain import backoffice, logger


@backoffice.command(part_of="AdminUser")
class CreateAdminUser:
    username = String(required=True, max_length=50)
    password = String(required=True, max_length=128)
    enforce_length = Boolean(default=True)


def find_admin(username: str) -> AdminUser | None:
    matches = current_domain.repository_for(AdminUser)._dao.query.filter(username=username).all().items
    return matches[0] if matches else None


@backoffice.command_handler(part_of=AdminUser)
class AdminAccountsHandler:
    @handle(CreateAdminUser)
    def create_admin_user(self, command):
        if find_admin(command.username) is not None:
            raise ValidationError({"username": [f"Admin {command.username!r} already exists"]})

        admin = AdminUser.register(command.username, command.password, enforce_length=command.enforce_length)
        current_domain.repository_for(AdminUser).add(admin)
        logger.info("Admin user created", username=admin.username)
        return str(admin.id)


def authenticate(username: str, password: str) -> AdminUser | None:
    """Return the admin for valid credentials, ``None`` otherwise.

    Unknown usernames and wrong passwords are indistinguishable to the
    caller.
    """
    admin = find_admin(username)
    if admin is None or not admin.check_password(password):
        logger.info("Admin login failed", username=username)
        return None

    admin.record_login(password)
    current_domain.repository_for(AdminUser).add(admin)
    logger.info("Admin logged in", username=username)
    return admin
