import copy
from types import SimpleNamespace
from typing import Optional

import pytest
from fastapi import Depends
from fastapi.testclient import TestClient

from app.core.dependencies import get_access_token, get_supabase
from app.main import app


class FakeAPIError(Exception):
    """Shape of postgrest's APIError: message + code."""

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.message = message
        self.code = code


class FakeAuthApiError(Exception):
    """Shape of Supabase Auth's AuthApiError: message + HTTP status."""

    def __init__(self, message: str, status: int = 400):
        super().__init__(message)
        self.message = message
        self.status = status


NO_ROWS = "JSON object requested, multiple (or no) rows returned"


class FakeQuery:
    def __init__(self, db: "FakeSupabase", table: str):
        self.db = db
        self.table = table
        self.action = "select"
        self.columns = "*"
        self.payload = None
        self.count_mode = None
        self.filters: list[tuple[str, object]] = []
        self.order_by = None
        self.descending = False
        self.limit_to = None
        self.single_row = False
        self.token = db.access_token

    def select(self, columns: str = "*", count: str | None = None):
        if self.action == "select":
            self.columns = columns
        self.count_mode = count
        return self

    def insert(self, payload):
        self.action = "insert"
        self.payload = payload
        return self

    def update(self, payload):
        self.action = "update"
        self.payload = payload
        return self

    def eq(self, column: str, value):
        self.filters.append((column, value))
        return self

    def order(self, column: str, desc: bool = False):
        self.order_by = column
        self.descending = desc
        return self

    def limit(self, size: int):
        self.limit_to = size
        return self

    def single(self):
        self.single_row = True
        return self

    def execute(self):
        self.db.calls.append(self)
        error = self.db.errors.get((self.table, self.action)) or self.db.errors.get((self.table, None))
        if error is not None:
            raise error

        rows = self.db.tables.setdefault(self.table, [])
        if self.action == "insert":
            new_rows = self.payload if isinstance(self.payload, list) else [self.payload]
            inserted = []
            for row in new_rows:
                stored = dict(row)
                stored.setdefault("id", f"{self.table}-{len(rows) + 1}")
                rows.append(stored)
                inserted.append(dict(stored))
            return SimpleNamespace(data=inserted, count=None)

        matched = [row for row in rows if all(row.get(c) == v for c, v in self.filters)]
        if self.action == "update":
            for row in matched:
                row.update(self.payload)
            return SimpleNamespace(data=[dict(row) for row in matched], count=None)

        count = len(matched) if self.count_mode else None
        if self.order_by:
            matched = sorted(matched, key=lambda row: row.get(self.order_by) or "", reverse=self.descending)
        if self.limit_to is not None:
            matched = matched[:self.limit_to]
        if self.single_row:
            if len(matched) != 1:
                raise FakeAPIError(NO_ROWS, code="PGRST116")
            return SimpleNamespace(data=dict(matched[0]), count=count)
        return SimpleNamespace(data=[dict(row) for row in matched], count=count)


class FakeAuth:
    def __init__(self):
        self.users: dict[str, SimpleNamespace] = {}
        self.accounts: dict[str, tuple[str, SimpleNamespace, str]] = {}
        self.sign_up_calls: list[dict] = []
        self.confirm_on_sign_up = True
        self.admin = FakeAuthAdmin()

    def add_user(self, token: str, user_id: str, email: str, metadata: dict | None = None, password: str = "secret123"):
        user = SimpleNamespace(
            id=user_id,
            email=email,
            user_metadata=metadata or {},
            app_metadata={},
            created_at=None,
            updated_at=None,
        )
        self.users[token] = user
        self.accounts[email] = (password, user, token)
        return user

    def get_user(self, jwt: str | None = None):
        user = self.users.get(jwt)
        if user is None:
            raise FakeAuthApiError("invalid JWT: unable to parse or verify signature", status=401)
        return SimpleNamespace(user=user)

    def sign_in_with_password(self, credentials: dict):
        account = self.accounts.get(credentials["email"])
        if account is None or account[0] != credentials["password"]:
            raise FakeAuthApiError("Invalid login credentials", status=400)
        _, user, token = account
        return SimpleNamespace(user=user, session=SimpleNamespace(access_token=token))

    def sign_up(self, credentials: dict):
        self.sign_up_calls.append(credentials)
        email = credentials["email"]
        if email in self.accounts:
            raise FakeAuthApiError("User already registered", status=422)
        token = f"token-{email}"
        metadata = credentials.get("options", {}).get("data", {})
        user = self.add_user(token, f"user-{len(self.users) + 1}", email, metadata, credentials["password"])
        session = SimpleNamespace(access_token=token) if self.confirm_on_sign_up else None
        return SimpleNamespace(user=user, session=session)

    @property
    def signed_out(self) -> bool:
        return bool(self.admin.signed_out_tokens)


class FakeAuthAdmin:
    def __init__(self):
        self.signed_out_tokens: list[str] = []

    def sign_out(self, jwt: str, scope: str = "global"):
        self.signed_out_tokens.append(jwt)


class ClientAuth:
    """Auth bound to one client: like supabase-py, signing in re-authorizes that client's table queries."""

    def __init__(self, auth: FakeAuth, client: "FakeSupabase"):
        self._auth = auth
        self._client = client

    def __getattr__(self, name):
        return getattr(self._auth, name)

    def sign_in_with_password(self, credentials: dict):
        response = self._auth.sign_in_with_password(credentials)
        self._client.access_token = response.session.access_token
        return response

    def sign_up(self, credentials: dict):
        response = self._auth.sign_up(credentials)
        if response.session:
            self._client.access_token = response.session.access_token
        return response


class FakePostgrest:
    def __init__(self, client: "FakeSupabase"):
        self._client = client

    def auth(self, token: str):
        self._client.access_token = token


class FakeSupabase:
    """In-memory stand-in for the Supabase client: table query builder plus auth."""

    def __init__(self):
        self.tables: dict[str, list[dict]] = {}
        self.errors: dict[tuple[str, str | None], Exception] = {}
        self.calls: list[FakeQuery] = []
        self.auth = FakeAuth()
        self.access_token: Optional[str] = None

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    @property
    def postgrest(self) -> FakePostgrest:
        return FakePostgrest(self)

    def for_caller(self, token: Optional[str] = None) -> "FakeSupabase":
        """A separate client over the same data, scoped to `token`, as built for each request."""
        view = copy.copy(self)
        view.access_token = token
        view.auth = ClientAuth(self.auth, view)
        return view

    def seed(self, table: str, *rows: dict):
        self.tables.setdefault(table, []).extend(dict(row) for row in rows)

    def fail(self, table: str, error: Exception, action: str | None = None):
        self.errors[(table, action)] = error

    def calls_for(self, table: str, action: str | None = None) -> list[FakeQuery]:
        return [c for c in self.calls if c.table == table and (action is None or c.action == action)]


COMPLETE_CLIENT = {
    "id": "user-1",
    "name": "Jane Doe",
    "contact_person_name": "Jane Doe",
    "contact_person_email": "jane@acme.com",
    "contact_person_phone": "08030000000",
    "contact_person_address": "12 Marina Rd, Lagos",
    "entity_type": "individual",
    "image_url": "",
    "status": "active",
}


@pytest.fixture
def fake_supabase():
    return FakeSupabase()


@pytest.fixture
def signed_in(fake_supabase):
    """A registered user with token 'token-1' and a complete client row."""
    fake_supabase.auth.add_user("token-1", "user-1", "jane@acme.com", {"name": "Jane Doe", "phone": "08030000000"})
    fake_supabase.seed("client", COMPLETE_CLIENT)
    return fake_supabase


@pytest.fixture
def auth_headers():
    return {"Authorization": "Bearer token-1"}


@pytest.fixture
def client(fake_supabase):
    def caller_client(token: Optional[str] = Depends(get_access_token)):
        return fake_supabase.for_caller(token)

    app.dependency_overrides[get_supabase] = caller_client
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
