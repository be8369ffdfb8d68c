"""
Integration tests for the account flow over PostgreSQL.

Covers registration through the API with the real database and the
check-then-insert race between concurrent registrations.
"""

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest
from fastapi.testclient import TestClient

from src.adapters.repository.postgres import PostgresAccountRepository
from src.api.dependencies import get_password_digest
from src.api.main import app
from src.domain.accounts import AccountService
from src.domain.digest import PasswordDigest
from src.domain.ports import Account
from src.domain.results import ServiceMessage, Status

pytestmark = pytest.mark.integration


@pytest.fixture
def client(
    pg_repository: PostgresAccountRepository, password_digest: PasswordDigest
) -> TestClient:
    """Create test client backed by the real database."""
    app.state.repository = pg_repository
    app.dependency_overrides[get_password_digest] = lambda: password_digest
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestAccountFlow:
    """Register, log in, read and update a profile end to end."""

    def test_full_flow(self, client: TestClient) -> None:
        registered = client.post(
            "/v1/register",
            json={"email": "alice@example.com", "password": "secret_123", "handle": "alice_w"},
        )
        assert registered.status_code == 201
        account_id = registered.json()["payload"]["id"]

        assert client.get("/v1/handles/alice_w").json()["message"] == "HANDLE_USED"

        login = client.post(
            "/v1/login", json={"email": "alice@example.com", "password": "secret_123"}
        )
        assert login.status_code == 200
        assert login.json()["payload"]["id"] == account_id

        updated = client.put(f"/v1/accounts/{account_id}", json={"signature": "hi"})
        assert updated.status_code == 200

        profile = client.get(f"/v1/accounts/{account_id}").json()["payload"]
        assert profile["signature"] == "hi"
        assert "password" not in profile

    def test_health(self, client: TestClient) -> None:
        assert client.get("/health").json() == {"status": "healthy"}


class TestConcurrentRegistration:
    """Concurrent registrations for the same email cannot both succeed."""

    def test_exactly_one_registration_succeeds(
        self, pg_repository: PostgresAccountRepository, password_digest: PasswordDigest
    ) -> None:
        service = AccountService(repository=pg_repository, password_digest=password_digest)
        barrier = threading.Barrier(5)

        def attempt(i: int) -> ServiceMessage:
            account = Account(
                email="race@example.com", password="secret_123", handle=f"racer_{i:03d}"
            )
            barrier.wait()
            checked = service.register_check(account)
            if checked.status is Status.ERROR:
                return checked.message
            return service.insert_account(checked.payload).message

        with ThreadPoolExecutor(max_workers=5) as executor:
            messages = list(executor.map(attempt, range(5)))

        assert messages.count(ServiceMessage.REGISTER_SUCCESS) == 1
        assert set(messages) <= {
            ServiceMessage.REGISTER_SUCCESS,
            ServiceMessage.EMAIL_ALREADY_USED,
            ServiceMessage.SYSTEM_EXCEPTION,
        }
