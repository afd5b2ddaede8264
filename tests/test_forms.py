import pytest

from remotesupport.forms import (
    FormError,
    Registration,
    check_login,
    check_registration,
    is_registration_ready,
    login_title,
    page_for_button,
)
from remotesupport.user_validator import UserType


def test_login_returns_trimmed_name():
    assert check_login("  alice  ", "password", True) == "alice"


@pytest.mark.parametrize("name,pw", [("", "password"), ("alice", ""), ("   ", "password")])
def test_login_empty_fields(name, pw):
    with pytest.raises(FormError) as info:
        check_login(name, pw, True)
    assert info.value.message == "用户名和密码不能为空"
    assert info.value.title == "错误"


def test_login_short_name():
    with pytest.raises(FormError) as info:
        check_login("al", "password", True)
    assert info.value.message == "用户名长度至少3个字符"


def test_login_requires_agreement():
    with pytest.raises(FormError) as info:
        check_login("alice", "password", False)
    assert info.value.message == "请先同意服务协议和隐私指导！"
    assert info.value.title == "提示"


def test_login_title():
    assert login_title(0) == "工厂用户登录"
    assert login_title(1) == "技术专家登录"


def test_registration_success():
    reg = check_registration(" bob ", "password", "password", " bob@example.com ", "", 1)
    assert reg == Registration("bob", "password", "bob@example.com", "", UserType.EXPERT)


def test_registration_short_password():
    with pytest.raises(FormError) as info:
        check_registration("bob", "token", "token", "", "", 0)
    assert info.value.message == "密码长度至少6个字符"


def test_registration_mismatch():
    with pytest.raises(FormError) as info:
        check_registration("bob", "password", "secret", "", "", 0)
    assert info.value.message == "两次输入的密码不一致"


def test_registration_bad_email():
    with pytest.raises(FormError) as info:
        check_registration("bob", "password", "password", "not-an-email", "", 0)
    assert info.value.message == "邮箱格式不正确"


@pytest.mark.parametrize("tel", ["12345", "abc", "2" * 11])
def test_registration_bad_phone(tel):
    with pytest.raises(FormError) as info:
        check_registration("bob", "password", "password", "", tel, 0)
    assert info.value.message == "手机号格式不正确"


def test_registration_short_name():
    with pytest.raises(FormError) as info:
        check_registration("bo", "password", "password", "", "", 0)
    assert info.value.message == "用户名长度至少3个字符"


def test_registration_bad_user_type():
    with pytest.raises(FormError):
        check_registration("bob", "password", "password", "", "", 7)


def test_ready_matches_check():
    assert is_registration_ready("bob", "password", "password", "bob@example.com", "")
    assert not is_registration_ready("bo", "password", "password", "", "")
    assert not is_registration_ready("bob", "password", "secret", "", "")
    assert not is_registration_ready("bob", "token", "token", "", "")
    assert not is_registration_ready("bob", "password", "password", "x@y", "")
    assert not is_registration_ready("bob", "password", "password", "", "12345")


def test_page_for_button():
    assert page_for_button("btnThanks") == 0
    assert page_for_button("btnOrders") == 1
    assert page_for_button("btnOther") is None