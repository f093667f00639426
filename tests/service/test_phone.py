from policydesk.service.phone import is_valid_phone_number, to_international


def test_is_valid_phone_number() -> None:
    for good in (
        "0721234567",
        "072 123 4567",
        "(072) 123-4567",
        "0111234567",
        "0861234567",
        "27721234567",
        "+27721234567",
        "+27 82 123 4567",
    ):
        assert is_valid_phone_number(good), good

    for bad in (
        None,
        "",
        "foo",
        "072123456",
        "07212345678",
        # 09 is not an allocated prefix
        "0912345678",
        "0021234567",
        "+2772123456",
        "+277212345678",
        "2772123456",
        "+44 20 7946 0958",
        "721234567",
    ):
        assert not is_valid_phone_number(bad), bad


def test_to_international() -> None:
    assert to_international("072 123 4567") == "+27721234567"
    assert to_international("27721234567") == "+27721234567"
    assert to_international("+27 72 123 4567") == "+27721234567"
    assert to_international("0912345678") is None
    assert to_international(None) is None
