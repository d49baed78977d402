"""
Smoke tests to verify all critical dependencies are installed correctly.

These tests confirm that:
1. Python 3.11+ is installed
2. All core dependencies are importable
3. Async functionality is available
4. Project version is accessible

Run with: pytest tests/unit/test_smoke.py -v
"""

import sys

import pytest


class TestPythonVersion:
    """Verify Python version requirements."""

    def test_python_311_or_higher(self) -> None:
        assert sys.version_info >= (3, 11), (
            f"Python 3.11+ required, "
            f"got {sys.version_info.major}.{sys.version_info.minor}"
        )


class TestCoreFramework:
    """Verify core framework dependencies."""

    def test_fastapi_import(self) -> None:
        """FastAPI must be importable."""
        from fastapi import FastAPI

        app = FastAPI()
        assert app is not None

    def test_pydantic_v2(self) -> None:
        """Pydantic v2 must be installed (required for FastAPI integration)."""
        import pydantic

        major_version = int(pydantic.VERSION.split(".")[0])
        assert major_version >= 2, f"Pydantic v2 required, got {pydantic.VERSION}"

    def test_uvicorn_import(self) -> None:
        import uvicorn

        assert uvicorn is not None


class TestPersonnelStore:
    """Verify database dependencies for the PostgreSQL personnel store."""

    def test_sqlalchemy_async(self) -> None:
        """SQLAlchemy 2.0+ async mode must be available."""
        from sqlalchemy import __version__ as sa_version
        from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine

        major_version = int(sa_version.split(".")[0])
        assert major_version >= 2, f"SQLAlchemy 2.0+ required, got {sa_version}"
        assert AsyncSession is not None
        assert create_async_engine is not None

    def test_asyncpg_import(self) -> None:
        import asyncpg

        assert asyncpg is not None

    def test_uuid7_ids_are_time_ordered(self) -> None:
        """Judge and slot ids are UUIDv7."""
        from uuid6 import uuid7

        first, second = uuid7(), uuid7()
        assert first.version == 7
        assert first < second


class TestStructuredLogging:
    """Verify structured logging for service operations."""

    def test_structlog_configuration(self) -> None:
        """structlog can be bound with context."""
        import structlog

        logger = structlog.get_logger()
        bound_logger = logger.bind(service="JudgeMoveService", operation="move")
        assert bound_logger is not None

    def test_dotenv_import(self) -> None:
        from dotenv import load_dotenv

        assert load_dotenv is not None


class TestProjectVersion:
    """Verify project metadata is accessible."""

    def test_version_format(self, project_version: str) -> None:
        """Version must be in semver format."""
        parts = project_version.split(".")
        assert len(parts) >= 2, f"Version must be semver format, got {project_version}"


class TestAsyncCapabilities:
    """Verify async/await functionality."""

    @pytest.mark.asyncio
    async def test_async_function_runs(self) -> None:
        import asyncio

        result = await asyncio.sleep(0, result="success")
        assert result == "success"
