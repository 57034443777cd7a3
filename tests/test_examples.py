"""Scenario tests for the worked examples."""

from data_result import Failure, Success
from data_result.examples import (
    DatabaseError,
    FileError,
    User,
    main,
    simulate_api_call,
    simulate_database_load,
    simulate_database_save,
    simulate_file_read,
    validate_email,
)


class TestApiCall:
    def test_success(self):
        user = None
        error = None

        def on_success(u):
            nonlocal user
            user = u

        def on_failure(e):
            nonlocal error
            error = e

        simulate_api_call(should_fail=False).match(on_success, on_failure)
        assert user == User(id=1, name="John Doe", email="john@example.com")
        assert error is None

    def test_failure(self):
        result = simulate_api_call(should_fail=True)
        assert result == Failure("Network timeout: Unable to reach server")


class TestValidateEmail:
    def test_valid(self):
        assert validate_email("user@example.com") == Success("user@example.com")

    def test_empty(self):
        assert validate_email("") == Failure(["Email is required"])

    def test_missing_at(self):
        assert validate_email("invalid") == Failure(["Email must contain @"])

    def test_missing_domain(self):
        assert validate_email("user@example") == Failure(
            ["Email must contain a domain"]
        )


class TestDatabase:
    def test_save(self):
        result = simulate_database_save(user_id=123, data={"name": "John Doe"})
        assert result.match(lambda record_id: record_id, lambda e: None) == 123

    def test_load_not_found(self):
        result = simulate_database_load(user_id=999)
        message = result.match(lambda data: None, lambda e: e.message)
        assert "not found" in message
        assert result == Failure(DatabaseError("Record not found", 404))

    def test_load(self):
        assert simulate_database_load(user_id=1) == Success(
            {"id": 1, "name": "John Doe"}
        )


class TestFileRead:
    def test_missing(self):
        assert simulate_file_read("missing.txt") == Failure(FileError.not_found)

    def test_present(self):
        assert simulate_file_read("config.json").is_success()


def test_main_prints_every_section(capsys):
    main()
    out = capsys.readouterr().out
    assert out.startswith("=== Data Result Examples ===")
    for n in range(1, 8):
        assert f"{n}. " in out
    assert "Got error" not in out
    assert "Validation errors: Email is required" in out
    assert "File error: not_found" in out
