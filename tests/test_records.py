import json
from datetime import datetime, timedelta, timezone

import pytest

from friendcore.records import (
    ZERO_TIME,
    Article,
    ArticlesStatus,
    Card,
    Chat,
    Message,
    Money,
    Notification,
    Transaction,
    Video,
    Withdrawal,
)


def test_scan_accepts_text():
    status = ArticlesStatus.scan("PUBLISHED")
    assert status == ArticlesStatus.PUBLISHED
    assert isinstance(status, ArticlesStatus)


def test_scan_accepts_bytes():
    assert ArticlesStatus.scan(b"DRAFT") == ArticlesStatus.DRAFT


def test_scan_keeps_unknown_text():
    assert ArticlesStatus.scan("ARCHIVED") == "ARCHIVED"


def test_scan_rejects_other_types():
    with pytest.raises(TypeError, match="unsupported scan type for ArticlesStatus: int"):
        ArticlesStatus.scan(5)


def test_zero_time_serialises_like_go():
    assert Chat().to_dict()["created_at"] == "0001-01-01T00:00:00Z"


def test_to_dict_keys_follow_field_names():
    keys = list(Transaction().to_dict())
    assert keys[0] == "id"
    assert keys[-1] == "desc"
    assert "receiver_id" in keys


def test_to_dict_is_json_serialisable_and_round_trips():
    moment = datetime(2021, 6, 1, 12, 30, 15, 250000, tzinfo=timezone.utc)
    article = Article(
        id=7,
        title="Hello",
        slug="hello",
        status=ArticlesStatus.PUBLISHED,
        date=moment,
        featured=True,
        visits=3,
    )
    text = json.dumps(article.to_dict())
    restored = Article.from_dict(json.loads(text))
    assert restored == article
    assert isinstance(restored.status, ArticlesStatus)


def test_fraction_trailing_zeros_are_trimmed():
    moment = datetime(2021, 6, 1, 12, 30, 15, 250000, tzinfo=timezone.utc)
    assert Chat(created_at=moment).to_dict()["created_at"].endswith(":15.25Z")


def test_offset_time_round_trips():
    zone = timezone(timedelta(hours=3))
    moment = datetime(2021, 1, 2, 3, 4, 5, tzinfo=zone)
    data = Message(read_at=moment).to_dict()
    assert data["read_at"].endswith("+03:00")
    assert Message.from_dict(data).read_at == moment


def test_from_dict_ignores_unknown_keys_and_nulls():
    card = Card.from_dict({"id": 4, "token": None, "unknown": "x", "main": True})
    assert card == Card(id=4, main=True)


def test_from_dict_defaults_to_zero_values():
    video = Video.from_dict({})
    assert video.created_at == ZERO_TIME
    assert video.price == 0.0
    assert video.src == ""
    assert video.restricted_for_rf is False


def test_float_fields_accept_integers():
    money = Money.from_dict({"amount": 10, "our_amount": 2.5})
    assert money.amount == 10.0
    assert isinstance(money.amount, float)


@pytest.mark.parametrize(
    "data",
    [
        {"id": "1"},
        {"id": True},
        {"id": 1.5},
        {"paid": 1},
        {"message": 3},
    ],
)
def test_from_dict_rejects_wrong_types(data):
    with pytest.raises(TypeError):
        Message.from_dict(data)


def test_from_dict_rejects_bad_timestamp():
    with pytest.raises(ValueError):
        Withdrawal.from_dict({"paid_at": "yesterday"})


def test_long_fraction_is_truncated_to_microseconds():
    chat = Chat.from_dict({"updated_at": "2020-02-03T04:05:06.123456789Z"})
    assert chat.updated_at.microsecond == 123456


def test_string_id_record_round_trips():
    note = Notification(id="abc", type="mention", notifiable_id=9, data="{}")
    assert Notification.from_dict(note.to_dict()) == note