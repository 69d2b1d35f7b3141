"""Password hashing, recruiter tokens and authenticated request contexts."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext

from app.core.exceptions import AuthenticationError
from app.models.company import Company

ALGORITHM = "HS256"


class PasswordHasher:
    """One-way salted hashing for company passwords."""

    def __init__(self, rounds: int = 29000):
        self._context = CryptContext(
            schemes=["pbkdf2_sha256"],
            deprecated="auto",
            pbkdf2_sha256__rounds=rounds,
        )

    def hash(self, password: str) -> str:
        return self._context.hash(password)

    def verify(self, password: str, hashed: str) -> bool:
        try:
            return self._context.verify(password, hashed)
        except ValueError:
            return False


class TokenIssuer:
    """Issues and verifies self-contained recruiter session tokens.

    Tokens carry only the company ID. Expiry is the sole invalidation
    mechanism.
    """

    def __init__(self, secret: str, expire_days: int = 30):
        self.secret = secret
        self.expires_delta = timedelta(days=expire_days)

    def issue(self, company_id: str, now: datetime | None = None) -> str:
        issued_at = now or datetime.now(UTC)
        payload = {
            "sub": company_id,
            "iat": issued_at,
            "exp": issued_at + self.expires_delta,
        }
        return jwt.encode(payload, self.secret, algorithm=ALGORITHM)

    def decode(self, token: str) -> str:
        """Return the company ID carried by ``token``."""
        try:
            payload = jwt.decode(token, self.secret, algorithms=[ALGORITHM])
        except ExpiredSignatureError as e:
            raise AuthenticationError(
                "Token expired. Please log in again.", reason="expired"
            ) from e
        except JWTError as e:
            raise AuthenticationError("Invalid token.", reason="invalid") from e

        company_id = payload.get("sub")
        if not company_id or not isinstance(company_id, str):
            raise AuthenticationError("Invalid token.", reason="invalid")
        return company_id


@dataclass(frozen=True)
class ApplicantContext:
    """Job seeker identity verified by the identity provider."""

    user_id: str

    @property
    def log_label(self) -> str:
        return f"applicant:{self.user_id}"


@dataclass(frozen=True)
class RecruiterContext:
    """Company identity verified from a locally issued token."""

    company: Company

    @property
    def company_id(self) -> str:
        return self.company.id

    @property
    def log_label(self) -> str:
        return f"company:{self.company.id}"
