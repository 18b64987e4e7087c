# urlinsight

Building blocks for a web service that takes URLs from its users, crawls
them, and reports what it found on each page. That report covers the HTML
version, the title, the heading counts, whether the page has a login form,
and its internal, external and broken links.

The package has three parts:

- **Models** for the service's records and for the shapes sent over the wire.
- **Flask handlers** for the health endpoints and the URL endpoints.
- **Authentication middleware** that accepts HTTP Basic credentials or a
  Bearer token.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Models

Each stored model is a dataclass. It has a `__tablename__` and a `to_dto()`
method that returns its response view. Each response view has a `to_dict()`
method that returns a JSON-ready mapping, with timestamps in ISO 8601 form.

| Module | Classes and functions |
| --- | --- |
| `urlinsight.url` | `Status`, `URL`, `URLDTO`, `CreateURLInput`, `UpdateURLInput`, `url_from_create_input` |
| `urlinsight.user` | `User`, `UserDTO`, `CreateUserInput`, `user_from_create_input` |
| `urlinsight.link` | `Link`, `LinkDTO`, `CreateLinkInput`, `link_from_create_input` |
| `urlinsight.analysis_result` | `AnalysisResult`, `AnalysisResultDTO`, `CreateAnalysisResultInput`, `analysis_result_from_create_input` |
| `urlinsight.token` | `TokenClaims`, `BlacklistedToken`, `BlacklistedTokenDTO`, `new_jti`, `from_jti` |
| `urlinsight.registry` | `all_models()`: the model classes in the order their tables are created |

### Status and URL parsing

`Status` has the values `queued`, `running`, `done`, `error` and `stopped`.
`URL.parsed_url()` returns the parsed `original_url`, or `None` when it
cannot be parsed.

### Input validation

The `Create…Input.from_dict` and `UpdateURLInput.from_dict` class methods
check a decoded JSON payload. They raise `ValueError` when a field is
missing or invalid. The checks are:

- `CreateURLInput`: needs a positive `user_id` and an absolute URL in
  `original_url`.
- `UpdateURLInput`: both fields are optional, and an absent field comes back
  as `None`. A client may not set the status to `stopped`.
- `CreateUserInput`: the username must be 3 to 50 characters long. The email
  must be a valid address. The password must be at least 6 characters long.
- `CreateLinkInput`: needs a positive `url_id` and an absolute URL in `href`.
  `status_code` must be between 100 and 599.
- `CreateAnalysisResultInput`: needs `url_id` and `html_version`. The heading
  counts must not be negative.

### Example

```python
from urlinsight.url import CreateURLInput, Status, url_from_create_input

data = CreateURLInput.from_dict({"user_id": 1, "original_url": "https://example.com"})
record = url_from_create_input(data)
assert record.status == Status.QUEUED
print(record.to_dto().to_dict())
```

### Token helpers

`new_jti()` returns a fresh random UUID string to use as a token identifier.
`from_jti(jti, expires_at)` builds a `BlacklistedToken` record for a revoked
token.

## Flask handlers and middleware

You supply the service objects that do the work:

- **Health handler.** It needs an object with a `check()` method. That method
  returns something with `service`, `healthy`, `database` and `checked`
  attributes.
- **URL handler.** It needs an object with `create`, `list`, `get`, `update`,
  `delete`, `start`, `stop` and `results` methods. A service method signals
  failure by raising an exception, and the message becomes the error text.
- **Middleware.** It needs an object with `authenticate_basic`, `validate`,
  `is_token_revoked` and `find_user_by_id` methods.

```python
from flask import Blueprint, Flask

from urlinsight.auth_middleware import auth_middleware
from urlinsight.health_handler import HealthHandler
from urlinsight.url_handler import URLHandler

app = Flask(__name__)

public = Blueprint("public", __name__)
HealthHandler(my_health_service).register_routes(public)
app.register_blueprint(public)

api = Blueprint("api", __name__, url_prefix="/api")
api.before_request(auth_middleware(my_auth_service))
URLHandler(my_url_service).register_protected_routes(api)
app.register_blueprint(api)
```

### Health endpoints

`HealthHandler.register_routes` mounts two endpoints:

- `GET /status` returns a welcome message, the service name and
  `"status": "running"`.
- `GET /health` returns the service name, the database status, and the time
  of the check in RFC 3339 form. It answers 200 when the service is healthy
  and 503 when it is not.

### URL endpoints

`URLHandler.register_protected_routes` mounts these endpoints:

| Method | Path |
| --- | --- |
| `POST` | `/urls` |
| `GET` | `/urls` |
| `GET` | `/urls/<id>` |
| `PUT` | `/urls/<id>` |
| `DELETE` | `/urls/<id>` |
| `PATCH` | `/urls/<id>/start` |
| `PATCH` | `/urls/<id>/stop` |
| `GET` | `/urls/<id>/results` |

How they respond:

- An `id` that is not an unsigned integer gets `400 {"error": "invalid id"}`.
- A body that fails validation gets `400 {"error": "invalid payload"}`.
- Starting a crawl answers `202 {"status": "queued"}`, and stopping one
  answers `202 {"status": "stopped"}`.
- Service failures give status 400. For `GET /urls/<id>` they give 404, and
  for `GET /urls` they give 500.

`GET /urls` lists the URLs of the user the middleware identified
(`flask.g.user_id`). It takes the `page` (default 1) and `page_size`
(default 10) query parameters. `pagination_from_query` reads them into a
`PageRequest`, and a malformed value is read as 0.

### Authentication

`auth_middleware(auth_service)` returns a before-request hook. It reads the
`Authorization` header.

- **Basic.** The header is `Basic` followed by base64-encoded
  `email:password`. The credentials go to `authenticate_basic`. On success
  the hook sets `g.user_id`.
- **Bearer.** An example header is `Bearer token`. The token goes to
  `validate`. The token must not be revoked, and its user must still exist.
  On success the hook sets `g.user_id` and `g.jti`.

Malformed Basic credentials (bad base64, or no colon) get a JSON error with
status 400. Everything else that fails gets a JSON error with status 401:

- a missing header
- an unsupported scheme
- wrong credentials
- an invalid, expired or revoked token
- a user that no longer exists

## What this package does not do

This package does not include the following. You provide them, or the
application built on the package does:

- Storage or database access.
- The crawler, HTML analyser or link checker that fill in analysis results.
- The health, URL and authentication services that the handlers call.
- Issuing or signing tokens.
- Configuration loading or a command to start a server.