"""Row types of the application database, with JSON-ready conversion."""

from __future__ import annotations

import dataclasses
import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, ClassVar

ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)

_RFC3339 = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})[Tt](\d{2}):(\d{2}):(\d{2})"
    r"(?:\.(\d+))?([Zz]|[+-]\d{2}:\d{2})"
)


def format_time(value: datetime) -> str:
    """Format a datetime as RFC 3339 with trailing zero fractions trimmed."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    text = (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )
    if value.microsecond:
        text += "." + f"{value.microsecond:06d}".rstrip("0")
    offset = value.utcoffset() or timedelta(0)
    if offset == timedelta(0):
        return text + "Z"
    sign = "-" if offset < timedelta(0) else "+"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{text}{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def parse_time(text: str) -> datetime:
    """Parse an RFC 3339 timestamp."""
    match = _RFC3339.fullmatch(text)
    if match is None:
        raise ValueError(f"cannot parse {text!r} as RFC 3339 time")
    year, month, day, hour, minute, second, fraction, zone = match.groups()
    micro = int((fraction or "")[:6].ljust(6, "0"))
    if zone in ("Z", "z"):
        tz = timezone.utc
    else:
        sign = -1 if zone[0] == "-" else 1
        tz = timezone(sign * timedelta(hours=int(zone[1:3]), minutes=int(zone[4:6])))
    return datetime(
        int(year), int(month), int(day), int(hour), int(minute), int(second), micro, tzinfo=tz
    )


class ArticlesStatus(str):
    """Publication state of an article; any string is accepted."""

    PUBLISHED: ClassVar[ArticlesStatus]
    DRAFT: ClassVar[ArticlesStatus]

    @classmethod
    def scan(cls, src: Any) -> ArticlesStatus:
        """Build a status from a database value given as bytes or text."""
        if isinstance(src, (bytes, bytearray)):
            return cls(bytes(src).decode())
        if isinstance(src, str):
            return cls(src)
        raise TypeError(f"unsupported scan type for ArticlesStatus: {type(src).__name__}")


ArticlesStatus.PUBLISHED = ArticlesStatus("PUBLISHED")
ArticlesStatus.DRAFT = ArticlesStatus("DRAFT")

_KINDS: dict[str, type] = {
    "bool": bool,
    "int": int,
    "float": float,
    "str": str,
    "datetime": datetime,
    "ArticlesStatus": ArticlesStatus,
}


def _field_kind(item: dataclasses.Field) -> type:
    kind = item.type
    if isinstance(kind, str):
        return _KINDS[kind]
    return kind


def _convert(name: str, kind: Any, value: Any) -> Any:
    if kind is bool:
        if isinstance(value, bool):
            return value
    elif kind is int:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    elif kind is float:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
    elif kind is datetime:
        if isinstance(value, datetime):
            return value
        if isinstance(value, str):
            return parse_time(value)
    elif kind is ArticlesStatus:
        if isinstance(value, str):
            return ArticlesStatus(value)
    elif kind is str:
        if isinstance(value, str):
            return value
    raise TypeError(f"field {name!r} expects {kind.__name__}, got {type(value).__name__}")


class Record:
    """Base for row types: conversion to and from JSON-ready dictionaries."""

    def to_dict(self) -> dict[str, Any]:
        """Return the row as a dictionary with JSON-compatible values."""
        result: dict[str, Any] = {}
        for item in dataclasses.fields(self):  # type: ignore[arg-type]
            value = getattr(self, item.name)
            if isinstance(value, datetime):
                value = format_time(value)
            elif isinstance(value, str):
                value = str(value)
            result[item.name] = value
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]):
        """Build a row from a dictionary; unknown keys and nulls are ignored."""
        kinds = {
            item.name: _field_kind(item)
            for item in dataclasses.fields(cls)  # type: ignore[arg-type]
        }
        kwargs = {
            key: _convert(key, kinds[key], value)
            for key, value in data.items()
            if key in kinds and value is not None
        }
        return cls(**kwargs)


@dataclass
class AppsCountriesDetailed(Record):
    id: int = 0
    countrycode: str = ""
    countryname: str = ""
    currencycode: str = ""
    fipscode: str = ""
    isonumeric: str = ""
    north: str = ""
    south: str = ""
    east: str = ""
    west: str = ""
    capital: str = ""
    continentname: str = ""
    continent: str = ""
    languages: str = ""
    isoalpha3: str = ""
    geonameid: int = 0


@dataclass
class Article(Record):
    id: int = 0
    title: str = ""
    slug: str = ""
    content: str = ""
    image: str = ""
    status: ArticlesStatus = ArticlesStatus("")
    date: datetime = ZERO_TIME
    featured: bool = False
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME
    deleted_at: datetime = ZERO_TIME
    visits: int = 0


@dataclass
class ArticleTag(Record):
    id: int = 0
    article_id: int = 0
    tag_id: int = 0
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME
    deleted_at: datetime = ZERO_TIME


@dataclass
class Ban(Record):
    id: int = 0
    description: str = ""
    level: int = 0
    user_id: int = 0
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME


@dataclass
class Card(Record):
    id: int = 0
    user_id: int = 0
    first6: str = ""
    last4: str = ""
    expiry_month: str = ""
    expiry_year: str = ""
    card_type: str = ""
    issuer_country: str = ""
    issuer_name: str = ""
    token: str = ""
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME
    main: bool = False


@dataclass
class Category(Record):
    id: int = 0
    parent_id: int = 0
    lft: int = 0
    rgt: int = 0
    depth: int = 0
    name: str = ""
    slug: str = ""
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME
    deleted_at: datetime = ZERO_TIME


@dataclass
class Chat(Record):
    id: int = 0
    last_message_id: int = 0
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME


@dataclass
class Comment(Record):
    id: int = 0
    commentable_type: str = ""
    commentable_id: int = 0
    commenter_type: str = ""
    commenter_id: int = 0
    comment: str = ""
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME


@dataclass
class Complaint(Record):
    id: int = 0
    user_id: int = 0
    sender_id: int = 0
    reason: int = 0
    status: int = 0
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME
    image: str = ""


@dataclass
class ComplaintReason(Record):
    id: int = 0
    reason: str = ""
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME


@dataclass
class DeviceSession(Record):
    id: int = 0
    uuid: str = ""
    user_id: int = 0
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME
    deleted_at: datetime = ZERO_TIME


@dataclass
class Dislike(Record):
    id: int = 0
    user_id: int = 0
    dislikeable_type: str = ""
    dislikeable_id: int = 0
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME


@dataclass
class DmcaComplaint(Record):
    id: int = 0
    url: str = ""
    email: str = ""
    description: str = ""
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME


@dataclass
class FailedJob(Record):
    id: int = 0
    connection: str = ""
    queue: str = ""
    payload: str = ""
    exception: str = ""
    failed_at: datetime = ZERO_TIME


@dataclass
class Faq(Record):
    id: int = 0
    type: int = 0
    theme_id: int = 0
    name: str = ""
    text: str = ""
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME


@dataclass
class FaqTheme(Record):
    id: int = 0
    name: str = ""
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME


@dataclass
class Gift(Record):
    id: int = 0
    user_id: int = 0
    name: str = ""
    phone: str = ""
    address: str = ""
    gift: int = 0
    status: int = 0
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME


@dataclass
class Image(Record):
    id: int = 0
    user_id: int = 0
    src: str = ""
    blured: str = ""
    price: float = 0.0
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME


@dataclass
class Like(Record):
    id: int = 0
    user_id: int = 0
    likeable_type: str = ""
    likeable_id: int = 0
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME


@dataclass
class Link(Record):
    id: int = 0
    link: str = ""
    name: str = ""
    user_id: int = 0
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME


@dataclass
class LinkVisit(Record):
    id: int = 0
    link_id: int = 0
    visits: int = 0
    hits_date: datetime = ZERO_TIME


@dataclass
class Message(Record):
    id: int = 0
    chat_id: int = 0
    sender_id: int = 0
    message: str = ""
    reply_to: int = 0
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME
    read_at: datetime = ZERO_TIME
    type: int = 0
    related_type: str = ""
    related_id: int = 0
    paid: bool = False
    is_greeting: bool = False


@dataclass
class Migration(Record):
    id: int = 0
    migration: str = ""
    batch: int = 0


@dataclass
class ModelHasPermission(Record):
    permission_id: int = 0
    model_type: str = ""
    model_id: int = 0


@dataclass
class ModelHasRole(Record):
    role_id: int = 0
    model_type: str = ""
    model_id: int = 0


@dataclass
class Money(Record):
    id: int = 0
    to_id: int = 0
    amount: float = 0.0
    our_amount: float = 0.0
    reason: int = 0
    payment_system: int = 0
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME
    status: int = 0
    referrer_amount: str = ""
    uuid: str = ""
    card_id: int = 0
    from_id: int = 0
    balance_after: str = ""


@dataclass
class Notification(Record):
    id: str = ""
    type: str = ""
    notifiable_type: str = ""
    notifiable_id: int = 0
    data: str = ""
    read_at: datetime = ZERO_TIME
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME


@dataclass
class OldWithdrawal(Record):
    id: int = 0
    user_id: int = 0
    amount: str = ""
    status: int = 0
    paid_at: datetime = ZERO_TIME
    method: str = ""
    details: str = ""
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME
    fio: str = ""
    user_bill: str = ""
    bank_bik: str = ""
    correspondent_bill: str = ""
    inn: str = ""
    kpp: str = ""
    iban_bsb: str = ""
    swift_aba: str = ""
    country_id: int = 0
    addres: str = ""


@dataclass
class PaidVideo(Record):
    id: int = 0
    user_id: int = 0
    video_id: int = 0
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME


@dataclass
class Participant(Record):
    id: int = 0
    user_id: int = 0
    chat_id: int = 0
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME


@dataclass
class PasswordReset(Record):
    email: str = ""
    token: str = ""
    created_at: datetime = ZERO_TIME


@dataclass
class Payment(Record):
    id: int = 0
    user_id: int = 0
    following_id: int = 0
    amount: float = 0.0
    currency: str = ""
    type: int = 0
    status: int = 0
    description: str = ""
    uuid: str = ""
    recurrent: bool = False
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME


@dataclass
class Permission(Record):
    id: int = 0
    name: str = ""
    guard_name: str = ""
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME


@dataclass
class QuestionTheme(Record):
    id: int = 0
    theme: str = ""
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME


@dataclass
class ReserveImage(Record):
    id: int = 0
    user_id: int = 0
    src: str = ""
    blured: str = ""
    price: float = 0.0
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME


@dataclass
class ReserveVideo(Record):
    id: int = 0
    user_id: int = 0
    privacy: int = 0
    top: bool = False
    price: float = 0.0
    title: str = ""
    description: str = ""
    original_name: str = ""
    thumbnail: str = ""
    disk: str = ""
    path: str = ""
    converted_for_downloading_at: datetime = ZERO_TIME
    converted_for_streaming_at: datetime = ZERO_TIME
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME
    shares_count: int = 0
    duration: int = 0
    ban: bool = False


@dataclass
class Role(Record):
    id: int = 0
    name: str = ""
    guard_name: str = ""
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME


@dataclass
class RoleHasPermission(Record):
    permission_id: int = 0
    role_id: int = 0


@dataclass
class RussianRequisite(Record):
    id: int = 0
    fio: str = ""
    user_bill: str = ""
    bank_bik: str = ""
    correspondent_bill: str = ""
    inn: str = ""
    kpp: str = ""
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME
    user_id: int = 0
    deleted_at: datetime = ZERO_TIME


@dataclass
class Tag(Record):
    id: int = 0
    name: str = ""
    slug: str = ""
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME
    deleted_at: datetime = ZERO_TIME


@dataclass
class TempSetting(Record):
    id: int = 0
    key: str = ""
    value: str = ""
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME


@dataclass
class Transaction(Record):
    id: int = 0
    user_id: int = 0
    receiver_id: int = 0
    amount: float = 0.0
    status: int = 0
    currency: str = ""
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME
    desc: str = ""


@dataclass
class UserFollower(Record):
    id: int = 0
    following_id: int = 0
    follower_id: int = 0
    accepted_at: datetime = ZERO_TIME
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME
    price: float = 0.0
    subscription_id: str = ""
    active: bool = False
    next_payment_at: datetime = ZERO_TIME
    debt_days: int = 0
    deleted_at: datetime = ZERO_TIME
    only_our: bool = False
    trial: bool = False


@dataclass
class UserQuestion(Record):
    id: int = 0
    name: str = ""
    email: str = ""
    theme: int = 0
    message: str = ""
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME


@dataclass
class Vacancy(Record):
    id: int = 0
    name: str = ""
    duty: str = ""
    qualification: str = ""
    link: str = ""
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME


@dataclass
class Verification(Record):
    id: int = 0
    user_id: int = 0
    selfie: str = ""
    doc: str = ""
    status: int = 0
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME
    random_photo: str = ""
    random_number: int = 0
    description: str = ""


@dataclass
class Video(Record):
    id: int = 0
    user_id: int = 0
    privacy: int = 0
    top: bool = False
    price: float = 0.0
    title: str = ""
    description: str = ""
    original_name: str = ""
    thumbnail: str = ""
    disk: str = ""
    path: str = ""
    converted_for_downloading_at: datetime = ZERO_TIME
    converted_for_streaming_at: datetime = ZERO_TIME
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME
    shares_count: int = 0
    duration: int = 0
    ban: bool = False
    thumbnail_id: int = 0
    views: int = 0
    likes_count: int = 0
    src: str = ""
    restricted_for_rf: bool = False


@dataclass
class Withdrawal(Record):
    id: int = 0
    amount: str = ""
    user_id: int = 0
    requisite_id: int = 0
    requisite_type: int = 0
    status: int = 0
    paid_by: int = 0
    paid_at: datetime = ZERO_TIME
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME
    deleted_at: datetime = ZERO_TIME
    start_payment: int = 0
    end_payment: int = 0
    full_amount: str = ""
    balance_after: str = ""
    original_amount: str = ""
    type: int = 0


@dataclass
class WorldRequisite(Record):
    id: int = 0
    fio: str = ""
    iban_bsb: str = ""
    swift_aba: str = ""
    address: str = ""
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME
    user_id: int = 0
    deleted_at: datetime = ZERO_TIME
    correspondent_swift: str = ""
    correspondent_bill: str = ""