"""Unit tests for app.core.config: Settings validation."""

import unittest

from pydantic import ValidationError

from app.core.config import Settings


def _settings(**overrides: object) -> Settings:
    """Build Settings from explicit values only (no .env file)."""
    return Settings(_env_file=None, **overrides)


class TestDatabaseUrl(unittest.TestCase):
    """DATABASE_URL accepts PostgreSQL and SQLite URLs and nothing else."""

    def test_accepts_postgres_and_sqlite(self) -> None:
        for url in (
            "postgresql://u:p@localhost:5432/storefront",
            "postgresql+psycopg2://u:p@db/storefront",
            "postgres://u:p@db/storefront",
            "sqlite:///./storefront.db",
            "sqlite://",
        ):
            with self.subTest(url=url):
                self.assertEqual(_settings(DATABASE_URL=url).DATABASE_URL, url)

    def test_strips_whitespace(self) -> None:
        self.assertEqual(_settings(DATABASE_URL="  sqlite://  ").DATABASE_URL, "sqlite://")

    def test_rejects_other_schemes_with_clear_message(self) -> None:
        for url in ("mysql://u:p@db:3306/shop", "mysql+pymysql://u:p@db/shop", "redis://localhost", ""):
            with self.subTest(url=url):
                with self.assertRaises(ValidationError) as ctx:
                    _settings(DATABASE_URL=url)
                self.assertIn("DATABASE_URL", str(ctx.exception))


class TestJwtSettings(unittest.TestCase):
    def test_algorithm_must_be_hmac(self) -> None:
        self.assertEqual(_settings(JWT_ALGORITHM="hs384").JWT_ALGORITHM, "HS384")
        with self.assertRaises(ValidationError):
            _settings(JWT_ALGORITHM="RS256")

    def test_expire_hours_bounds(self) -> None:
        self.assertEqual(_settings(JWT_EXPIRE_HOURS=24).JWT_EXPIRE_HOURS, 24)
        for hours in (0, 169):
            with self.subTest(hours=hours):
                with self.assertRaises(ValidationError):
                    _settings(JWT_EXPIRE_HOURS=hours)


if __name__ == "__main__":
    unittest.main()
