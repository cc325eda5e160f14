from friendcore.user import User


def test_after_create_fills_defaults_and_saves():
    saved = []
    user = User(id=42, email="noone", country_id=7, ip="10.0.0.1")
    user.after_create(saved.append)
    assert saved == [user]
    assert user.username == "42"
    assert user.name == "42"
    assert user.email == "42@me"
    assert user.country_id == 0
    assert user.adult is True
    assert user.follow_price == 6.66
    assert user.currency == "USD"
    assert user.lang == "RU"
    assert user.ip == ""


def test_after_create_keeps_real_email():
    user = User(id=3, email="alice@example.com")
    user.after_create(lambda u: None)
    assert user.email == "alice@example.com"
    assert user.username == "3"


def test_to_dict_hides_secret_fields():
    password = "password"
    user = User(id=1, username="alice", password=password, auth_token="token")
    data = user.to_dict()
    assert "password" not in data
    assert "auth_token" not in data
    assert data["username"] == "alice"
    assert data["id"] == 1


def test_from_dict_ignores_secret_fields():
    user = User.from_dict({"id": 9, "password": "password", "auth_token": "token", "name": "bob"})
    assert user.password == ""
    assert user.auth_token == ""
    assert user.name == "bob"
    assert user.id == 9


def test_round_trip():
    user = User(id=5, name="carol", balance=12.5, verified=True, followers_count=3)
    assert User.from_dict(user.to_dict()) == user


def test_repr_omits_password():
    password = "password"
    user = User(id=1, password=password)
    assert "password" not in repr(user)