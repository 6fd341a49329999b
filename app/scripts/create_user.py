"""
Create an account directly (e.g. the first admin; registration always assigns 'customer').
Run from project root:
  python -m app.scripts.create_user NAME EMAIL PASSWORD [role]
Example:
  python -m app.scripts.create_user "Store Admin" admin@example.com your-secure-password admin
"""
import argparse
import logging
import sys

from pydantic import ValidationError
from sqlalchemy.orm import Session

from app.core.database import SessionLocal
from app.core.security import HashingFailure, hash_password
from app.models.user import User
from app.schemas.user import CreateUserRequest

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def create_user(db: Session, request: CreateUserRequest, role: str) -> User | None:
    """Insert the account unless the email is taken; returns None on conflict."""
    existing = db.query(User).filter(User.email == request.email).first()
    if existing:
        return None
    user = User(
        name=request.name,
        email=request.email,
        password_hash=hash_password(request.password),
        role=role,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a storefront account.")
    parser.add_argument("name", help="Display name")
    parser.add_argument("email", help="Unique email address")
    parser.add_argument("password", help="Password (8-72 characters)")
    parser.add_argument("role", nargs="?", default="customer", choices=["customer", "admin"])
    args = parser.parse_args(argv)

    try:
        request = CreateUserRequest(name=args.name, email=args.email, password=args.password)
    except ValidationError as e:
        for err in e.errors():
            print(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}", file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        user = create_user(db, request, args.role)
    except HashingFailure as e:
        logger.error("Account creation failed: %s", e.message)
        return 1
    finally:
        db.close()

    if user is None:
        print(f"An account for '{request.email}' already exists.", file=sys.stderr)
        return 1
    logger.info("Created user id=%s with role '%s'.", user.id, args.role)
    return 0


if __name__ == "__main__":
    sys.exit(main())
