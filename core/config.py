"""
=============================================
Configuration management for table-codegen.
=============================================

Loads all configuration from environment variables (.env file) and provides
a centralized Config singleton for application-wide access. Command-line
flags override these values.

The configuration system ensures:
- Single source of truth for connection and output settings
- Type conversion for ports and flags
- Secure handling of the database password (never logged)

Example:
    >>> from core.config import config
    >>>
    >>> # Database connection
    >>> print(f"Host: {config.db_host}, Port: {config.db_port}")
    >>>
    >>> # Output destination
    >>> print(config.output.out or 'current directory')
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(dotenv_path=env_path)

_TRUE_VALUES = ('1', 'true', 'yes', 'on')


def _env_bool(name: str, default: bool = False) -> bool:
    """Read a boolean flag from the environment."""
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


def _env_int(name: str) -> Optional[int]:
    """Read an optional integer from the environment."""
    value = os.getenv(name)
    if not value:
        return None
    return int(value)


@dataclass
class DatabaseConfig:
    """Database catalog connection settings.

    Attributes:
        rdbms: Database type name (mysql, postgres)
        host: Server hostname or IP address
        port: Server port; None means the RDBMS default
        user: Database username with catalog read privileges
        password: Database password
        database: Database whose tables are introspected
        schema: Optional schema; None means the connection default
    """

    rdbms: str
    host: str
    port: Optional[int]
    user: str
    password: str
    database: str
    schema: Optional[str] = None


@dataclass
class OutputConfig:
    """Code generation output settings.

    Attributes:
        out: Output destination: a directory, a .py file, 'stdout', or empty
            for the current directory
        package: Package name written into generated file headers
        file_per_table: Write each table to its own file
        placeholder: Positional placeholder used in emitted SQL; empty means
            the paramstyle of the RDBMS driver
        log_level: Default logging level
    """

    out: str
    package: str
    file_per_table: bool
    placeholder: str
    log_level: str


class Config:
    """Centralized configuration manager.

    Attributes:
        db: DatabaseConfig with catalog connection settings
        output: OutputConfig with code generation settings

    Example:
        >>> config = Config()
        >>> print(f"Reading {config.db_name} at {config.db_host}")
    """

    def __init__(self):
        """Initialize configuration from environment variables."""
        self.db = DatabaseConfig(
            rdbms=os.getenv('CODEGEN_RDBMS', ''),
            host=os.getenv('CODEGEN_DB_HOST', 'localhost'),
            port=_env_int('CODEGEN_DB_PORT'),
            user=os.getenv('CODEGEN_DB_USER', ''),
            password=os.getenv('CODEGEN_DB_PASSWORD', ''),
            database=os.getenv('CODEGEN_DB_NAME', ''),
            schema=os.getenv('CODEGEN_DB_SCHEMA') or None
        )

        self.output = OutputConfig(
            out=os.getenv('CODEGEN_OUT', ''),
            package=os.getenv('CODEGEN_PACKAGE', ''),
            file_per_table=_env_bool('CODEGEN_SEPARATE_FILES'),
            placeholder=os.getenv('CODEGEN_PLACEHOLDER', ''),
            log_level=os.getenv('CODEGEN_LOG_LEVEL', 'INFO')
        )

    @property
    def rdbms(self) -> str:
        """Get the configured database type name."""
        return self.db.rdbms

    @property
    def db_host(self) -> str:
        """Get database server hostname."""
        return self.db.host

    @property
    def db_port(self) -> Optional[int]:
        """Get database server port number."""
        return self.db.port

    @property
    def db_user(self) -> str:
        """Get database username."""
        return self.db.user

    @property
    def db_password(self) -> str:
        """Get database password."""
        return self.db.password

    @property
    def db_name(self) -> str:
        """Get the name of the database to introspect."""
        return self.db.database

    @property
    def db_schema(self) -> Optional[str]:
        """Get the schema to introspect."""
        return self.db.schema


# Global configuration instance
config = Config()
