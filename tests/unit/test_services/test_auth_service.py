import pytest
from sqlalchemy.orm import Session
from coopboard.services.auth_service import AuthService
from coopboard.core.exception import AuthenticationException, ResourceNotFoundException
from coopboard.security import create_access_token, decode_access_token


@pytest.mark.unit
class TestAuthService:
    """Unit tests for AuthService."""

    def test_resolve_is_case_insensitive(self, db_session: Session, rossi):
        auth_service = AuthService(db_session)

        family = auth_service.resolve("  ROSSI ")

        assert family.id == rossi.id
        assert family.display_name == "Rossi"

    def test_resolve_unknown_family(self, db_session: Session, rossi):
        auth_service = AuthService(db_session)

        with pytest.raises(ResourceNotFoundException) as exc_info:
            auth_service.resolve("neri")

        assert "Family was not found" in str(exc_info.value.detail)

    def test_login_success(self, db_session: Session, admin):
        """Test login issues a token for the resolved family."""
        auth_service = AuthService(db_session)

        response = auth_service.login("Segreteria")

        assert response.token_type == "bearer"
        assert response.family.username == "segreteria"
        assert response.family.is_admin is True

        payload = decode_access_token(response.access_token)
        assert payload is not None
        assert int(payload["sub"]) == admin.id
        assert payload["username"] == "segreteria"

    def test_login_unknown_family(self, db_session: Session):
        auth_service = AuthService(db_session)

        with pytest.raises(ResourceNotFoundException):
            auth_service.login("nobody")

    def test_verify_token_success(self, db_session: Session, rossi):
        auth_service = AuthService(db_session)
        token = auth_service.login("rossi").access_token

        family = auth_service.verify_token(token)

        assert family.id == rossi.id

    def test_verify_invalid_token(self, db_session: Session):
        auth_service = AuthService(db_session)

        with pytest.raises(AuthenticationException) as exc_info:
            auth_service.verify_token("invalid_token")

        assert "Could not validate credentials" in str(exc_info.value.detail)

    def test_verify_token_without_subject(self, db_session: Session):
        auth_service = AuthService(db_session)
        token = create_access_token({"username": "rossi"})

        with pytest.raises(AuthenticationException):
            auth_service.verify_token(token)

    def test_verify_token_for_removed_family(self, db_session: Session):
        auth_service = AuthService(db_session)
        token = create_access_token({"sub": "999"})

        with pytest.raises(AuthenticationException) as exc_info:
            auth_service.verify_token(token)

        assert exc_info.value.status_code == 401
        assert "Family not found" in str(exc_info.value.detail)
