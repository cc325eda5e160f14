"""The application user row and its creation hook."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable

from .records import ZERO_TIME, Record

_HIDDEN = frozenset({"password", "auth_token"})


@dataclass
class User(Record):
    """A registered user; the password and auth token never appear in JSON."""

    id: int = 0
    name: str = ""
    username: str = ""
    balance: float = 0.0
    avatar: str = ""
    cover: str = ""
    about: str = ""
    url: str = ""
    wishlist: str = ""
    email: str = ""
    email_verified_at: datetime = ZERO_TIME
    password: str = field(default="", repr=False)
    remember_token: str = ""
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME
    follow_price: float = 0.0
    free_days: bool = False
    button_text: str = ""
    is_first_time: bool = False
    cloud_token: str = ""
    adult: bool = False
    soc_id: str = ""
    phone: str = ""
    hide_fols: bool = False
    profile_type: int = 0
    referrer_id: int = 0
    subscriber_uid: str = ""
    push_type: int = 0
    verified: bool = False
    allow_mass_send: bool = False
    allow_greeting: bool = False
    greeting_text: str = ""
    auth_token: str = field(default="", repr=False)
    push_web: bool = False
    push_email: bool = False
    push_telegram: bool = False
    telegram_started: bool = False
    percent: int = 0
    last_online_at: datetime = ZERO_TIME
    ban: bool = False
    email_confirmation_code: str = ""
    ip: str = ""
    percent_as_ref: int = 0
    service_percent_as_ref: int = 0
    show_video: bool = False
    country_id: int = 0
    lang: str = ""
    only_our: bool = False
    currency: str = ""
    refs_free_month: bool = False
    followers_count: int = 0
    videos_count: int = 0
    followings_count: int = 0
    unread_messages: int = 0
    friends_count: int = 0
    likes_count: int = 0
    is_referrer: bool = False
    has_cards: bool = False
    entered_link: int = 0
    restricted_for_rf: bool = False
    profile_views: int = 0
    min_withdrawal: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the row as a JSON-ready dictionary without secret fields."""
        data = super().to_dict()
        for key in _HIDDEN:
            data.pop(key, None)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> User:
        """Build a user from a dictionary; secret fields in it are ignored."""
        return super().from_dict({k: v for k, v in data.items() if k not in _HIDDEN})

    def after_create(self, save: Callable[[User], Any]) -> None:
        """Fill in the defaults of a freshly inserted user and persist them with ``save``."""
        ident = str(self.id)
        self.username = ident
        self.name = ident
        if "@" not in self.email:
            self.email = ident + "@me"
        self.country_id = 0
        self.adult = True
        self.follow_price = 6.66
        self.currency = "USD"
        self.lang = "RU"
        self.ip = ""
        save(self)