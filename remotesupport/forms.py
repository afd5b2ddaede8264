"""Input rules of the desktop client's login, registration and main window."""

from __future__ import annotations

import re
from dataclasses import dataclass

from remotesupport.user_validator import UserType

USER_TYPE_LABELS = ("工厂用户", "技术专家")

_EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
_PHONE_RE = re.compile(r"1[3-9]\d{9}", re.ASCII)

_PAGES = {"btnThanks": 0, "btnOrders": 1}


class FormError(ValueError):
    """A form was filled in wrongly; ``message`` is shown to the user."""

    def __init__(self, message: str, title: str = "错误") -> None:
        super().__init__(message)
        self.message = message
        self.title = title


@dataclass(frozen=True)
class Registration:
    """Registration data that passed the form's checks."""

    username: str
    password: str
    email: str
    phone: str
    user_type: UserType


def _is_email(text: str) -> bool:
    return _EMAIL_RE.fullmatch(text) is not None


def _is_phone(text: str) -> bool:
    return _PHONE_RE.fullmatch(text) is not None


def check_login(username: str, password: str, agreed: bool) -> str:
    """Check the login form and return the trimmed user name."""
    name = username.strip()
    if not name or not password:
        raise FormError("用户名和密码不能为空")
    if len(name) < 3:
        raise FormError("用户名长度至少3个字符")
    if not agreed:
        raise FormError("请先同意服务协议和隐私指导！", title="提示")
    return name


def login_title(user_type: int) -> str:
    """Heading of the login dialog for the selected user type."""
    return "工厂用户登录" if user_type == UserType.FACTORY else "技术专家登录"


def check_registration(
    username: str,
    password: str,
    confirm: str,
    email: str,
    phone: str,
    user_type: int,
) -> Registration:
    """Check the registration form; email and phone are optional."""
    name = username.strip()
    mail = email.strip()
    tel = phone.strip()
    if not name or not password:
        raise FormError("用户名和密码不能为空")
    if len(name) < 3:
        raise FormError("用户名长度至少3个字符")
    if len(password) < 6:
        raise FormError("密码长度至少6个字符")
    if password != confirm:
        raise FormError("两次输入的密码不一致")
    if mail and not _is_email(mail):
        raise FormError("邮箱格式不正确")
    if tel and not _is_phone(tel):
        raise FormError("手机号格式不正确")
    try:
        kind = UserType(user_type)
    except ValueError:
        raise FormError("用户类型无效") from None
    return Registration(name, password, mail, tel, kind)


def is_registration_ready(
    username: str, password: str, confirm: str, email: str, phone: str
) -> bool:
    """Whether the register button may be enabled for the current input."""
    if len(username.strip()) < 3:
        return False
    if len(password) < 6 or password != confirm:
        return False
    if email and not _is_email(email):
        return False
    if phone and not _is_phone(phone):
        return False
    return True


def page_for_button(name: str) -> int | None:
    """Index of the page a side navigation button shows, if any."""
    return _PAGES.get(name)