# friendcore

Core pieces of a social platform backend:

- **Settings** read from the environment, with a `.env` file in the
  working directory loaded first (`friendcore.config`).
- **Records**: dataclasses for every table of the platform's schema, with
  conversion to and from JSON-ready dictionaries (`friendcore.records`).
- **Users**: the `User` record and the defaults it receives right after it
  is first stored (`friendcore.user`).
- **Security helpers**: bcrypt password hashing, random strings and HS256
  JSON Web Tokens (`friendcore.security`).
- **Database**: PostgreSQL connection strings and a shared SQLAlchemy
  engine (`friendcore.database`).
- **Logging**: a logger that writes to a daily `logs-Y.M.D.txt` file
  (`friendcore.logger`).
- **Middleware**: Starlette middleware that reads a bearer token and
  exposes its claims, plus a decorator that guards endpoints
  (`friendcore.middleware`).

Install with the test extra to run the tests:

```
pip install .[test]
pytest
```

## Settings

```python
from friendcore.config import config

host = config("DB_HOST")
```

`config` loads `.env` from the working directory (without overriding
variables that are already set) and then reads the process environment.
When there is no `.env` file it prints `Error loading .env file` and carries
on. A key that is not set gives an empty string.

## Passwords and tokens

```python
from friendcore.security import hash_password, is_same, random_string, new_token, decode_token
from friendcore.user import User

hashed = hash_password("password")
assert is_same("password", hashed)
assert not is_same("other", hashed)

code = random_string(16)          # 16 ASCII letters and digits

user = User(id=42, username="42", email="someone@example.com")
jwt_text = new_token(user, secret="secret")
claims = decode_token(jwt_text, secret="secret")
assert claims == {"user_id": 42, "username": "42"}
```

Hashes use bcrypt at cost 10. `is_same` returns `False` for a value that is
not a valid bcrypt hash. `random_string` raises `ValueError` for a negative
length. When `secret` is left out, `new_token` and `decode_token` use the
`JWT_SECRET` setting; `decode_token` raises PyJWT's errors for a token that
does not verify.

## Records

```python
from friendcore.records import Article, ArticlesStatus

status = ArticlesStatus.scan(b"DRAFT")
article = Article.from_dict({"id": 1, "title": "Hello", "status": "PUBLISHED"})
data = article.to_dict()
```

Every record is a dataclass whose fields default to zero values (`0`, `""`,
`False`, and `ZERO_TIME` for timestamps). `to_dict` writes timestamps as
RFC 3339 text; `from_dict` accepts RFC 3339 text or `datetime` objects,
ignores unknown keys and `None` values, and raises `TypeError` when a value
has the wrong type. `ArticlesStatus.scan` accepts `str` or `bytes` and
raises `TypeError` for anything else; `ArticlesStatus.PUBLISHED` and
`ArticlesStatus.DRAFT` are the two known states.

## New users

`User` is a record like the others, except that `password` and
`auth_token` are left out of `to_dict` and ignored by `from_dict`.

Once a user row has been inserted and has an id, `after_create` fills in
the platform defaults — username and name from the id, an `<id>@me` e-mail
when the given one has no `@`, country 0, currency `USD`, language `RU`, an
adult profile, an empty IP and a follow price of 6.66 — and hands the user
to the `save` callable:

```python
user = User(id=7, email="")
user.after_create(save=lambda u: None)
assert user.email == "7@me"
```

## Database

```python
from friendcore.database import build_dsn, connect_db, get_engine

password = "password"
dsn = build_dsn("localhost", 5432, "user", password, "friends")
# 'host=localhost port=5432 user=user password=password dbname=friends sslmode=disable'

engine = connect_db("sqlite://")
assert get_engine() is engine
```

`build_dsn` turns a port that is not a plain number into `0`. Called
without a URL, `connect_db` builds such a connection string from
`DB_HOST`, `DB_PORT`, `DB_USER`, `DB_PASSWORD` and `DB_NAME` and opens
PostgreSQL with it; that needs a PostgreSQL driver for SQLAlchemy
(such as psycopg2), which this package does not install. `connect_db`
checks the connection, prints `Connection Opened to Database`, and raises
`RuntimeError` when it cannot connect. `get_engine` raises `RuntimeError`
before a connection has been opened.

## Web middleware

```python
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.responses import JSONResponse
from starlette.routing import Route

from friendcore.middleware import AuthenticateMiddleware, protected

@protected
async def me(request):
    return JSONResponse({"user_id": request.state.user_id})

app = Starlette(
    routes=[Route("/me", me)],
    middleware=[Middleware(AuthenticateMiddleware, secret="secret")],
)
```

A client sends its token as `Authorization: Bearer token`.
`AuthenticateMiddleware` never rejects a request: for a valid HS256 token
it stores the decoded claims in `request.state.user` and each claim as a
text attribute of `request.state` (so `user_id` 42 becomes `"42"`);
anything else simply passes through. Without `secret` it uses the
`JWT_SECRET` setting.

`protected` wraps sync or async endpoints. A request without a `user_id`
claim gets status 401 and
`{"status": "error", "message": "Invalid or expired JWT", "data": null}`.
`jwt_error("Missing or malformed JWT")` gives the 400 response with that
message; any other message gives the 401 response above.

## Logging

```python
from friendcore.logger import setup_logger

log = setup_logger(".")
log.info("started")
```

`setup_logger` appends to `logs-<year>.<month>.<day>.txt` (month and day
not zero-padded) in the given directory, or the working directory, and
returns the `friendcore` logger. Calling it again replaces the previous
file handler.

## What this package does not do

It provides building blocks only. There is no command to run, no web
server and no application routes beyond what you assemble with Starlette.
The records are plain dataclasses: the package does not create tables,
map records to the database or run queries — `after_create` relies on the
`save` callable you pass to store the user.