"""
=====================================================
Command-line driver for table-codegen.
=====================================================

Reads a database's catalog and writes Python dataclass definitions, with
basic CRUD SQL and data-access methods, for each table and view.

Steps:
    1. Database connectivity check (utils.database_utils)
    2. Catalog introspection (catalog.inspector)
    3. Code emission (codegen.module)
    4. Output to one module, one module per table, or stdout

Connection and output settings come from the environment (.env, see
core.config); command-line flags override them.

Usage:
    # Generate inventory.py in the current directory
    python main.py --rdbms mysql --db inventory -u codegen -p secret

    # One module per table under models/
    python main.py --rdbms postgres --db inventory -u codegen -p secret \\
        --out models --separate-files

    # Print to stdout
    python main.py --rdbms mysql --db inventory -u codegen -p secret --out stdout

Example:
    >>> from catalog.dbtype import DBType
    >>> from main import CodegenOrchestrator, resolve_output
    >>>
    >>> orchestrator = CodegenOrchestrator(
    ...     db_type=DBType.MYSQL, host='localhost', port=None,
    ...     user='codegen', password='secret', database='inventory'
    ... )
    >>> orchestrator.run(resolve_output('models', 'inventory'))
"""

import argparse
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, TextIO

from catalog.dbtype import DBType, UnsupportedDBError, parse_db_type
from catalog.inspector import CatalogError, CatalogReader
from catalog.models import Table
from codegen.module import CodegenError, ModuleEmitter
from codegen.naming import field_name, unique_names
from core.config import config
from core.logger import get_logger, set_log_level, setup_logging
from utils.database_utils import verify_connection

logger = get_logger(__name__)

STDOUT = 'stdout'
SOURCE_EXT = '.py'


class OrchestratorError(Exception):
    """Exception raised when code generation cannot complete."""
    pass


@dataclass
class OutputTarget:
    """Resolved output destination.

    Attributes:
        directory: Directory written to, or 'stdout'
        filename: Module file name; empty for stdout
        file_per_table: Write one module per table into directory
    """

    directory: str
    filename: str
    file_per_table: bool = False

    @property
    def is_stdout(self) -> bool:
        return self.directory == STDOUT

    @property
    def path(self) -> Path:
        return Path(self.directory) / self.filename


def resolve_output(out: str, db_name: str, file_per_table: bool = False) -> OutputTarget:
    """
    Work out where generated code goes and make sure the directory exists.

    Rules:
        - 'stdout' writes to standard output; file_per_table is turned off
        - '' writes <db_name>.py to the current working directory
        - Environment variables and ~ in out are expanded
        - A path ending in .py names the output file; otherwise out is the
          directory and the file is <db_name>.py

    Args:
        out: Output destination
        db_name: Database name, used for the default file name
        file_per_table: Write one module per table

    Returns:
        OutputTarget

    Raises:
        OrchestratorError: If the output directory cannot be created
    """
    if out == STDOUT:
        return OutputTarget(directory=STDOUT, filename='', file_per_table=False)

    filename = ''
    if not out:
        directory = os.getcwd()
    else:
        out = os.path.expandvars(os.path.expanduser(out))
        if os.path.splitext(out)[1] == SOURCE_EXT:
            filename = os.path.basename(out)
            directory = os.path.dirname(out) or '.'
        else:
            directory = out

    if file_per_table and filename:
        logger.warning(
            f"⚠️  --separate-files was set and the output destination names a file; "
            f"each table will be written to its own file in {directory!r}"
        )

    try:
        Path(directory).mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OrchestratorError(f"Failed to create output directory {directory}: {e}")

    if not filename:
        filename = db_name + SOURCE_EXT

    logger.info(f"Writing generated {SOURCE_EXT} files to the {directory!r} directory")
    return OutputTarget(directory=directory, filename=filename, file_per_table=file_per_table)


def _file_stem(table_name: str) -> str:
    return field_name(table_name).rstrip('_')


def table_filenames(tables: Sequence[Table]) -> Dict[str, str]:
    """
    File names for one module per table, keyed by table name.

    Tables whose file names clash, such as 'Orders' and 'orders', get a
    '_2', '_3', ... suffix so no file is overwritten.
    """
    stems = unique_names((table.name for table in tables), _file_stem, '_')
    return {name: stem + SOURCE_EXT for name, stem in stems.items()}


class CodegenOrchestrator:
    """
    Coordinates catalog reading, code emission and output.

    Attributes:
        db_type: Database type
        host: Server hostname
        port: Server port; None uses the RDBMS default
        user: Database user
        password: Database password
        database: Database to introspect
        schema: Schema to introspect; None uses the connection default
        package: Package name for generated headers (defaults to database)
        placeholder: Positional placeholder in emitted SQL (defaults to
            the driver's paramstyle)
    """

    def __init__(
        self,
        db_type: DBType,
        host: str,
        port: Optional[int],
        user: str,
        password: str,
        database: str,
        schema: Optional[str] = None,
        package: Optional[str] = None,
        placeholder: Optional[str] = None
    ):
        self.db_type = db_type
        self.host = host
        self.port = port
        self.user = user
        self.password = password
        self.database = database
        self.schema = schema
        self.package = package or database
        self.placeholder = placeholder or db_type.default_placeholder

        self.emitter = ModuleEmitter(
            package=self.package,
            db_type=db_type,
            placeholder=self.placeholder
        )

    def verify_prerequisites(self) -> bool:
        """
        Check that the database accepts connections.

        Raises:
            OrchestratorError: If the database is not reachable
        """
        logger.info(f"🔍 Connecting to {self.db_type.display_name} at {self.host}...")
        success, message = verify_connection(
            self.db_type,
            host=self.host,
            port=self.port,
            user=self.user,
            password=self.password,
            database=self.database
        )
        if not success:
            logger.error(f"❌ {message}")
            raise OrchestratorError(message)

        logger.info(f"✅ {message}")
        return True

    def read_catalog(self) -> List[Table]:
        """
        Read every table and view from the catalog.

        Raises:
            OrchestratorError: If the catalog cannot be read
        """
        reader = CatalogReader(
            db_type=self.db_type,
            host=self.host,
            port=self.port,
            user=self.user,
            password=self.password,
            database=self.database,
            schema=self.schema
        )
        try:
            return reader.get_tables()
        except CatalogError as e:
            raise OrchestratorError(f"Gathering of {self.database} failed: {e}")
        finally:
            reader.close()

    def write(self, tables: Sequence[Table], target: OutputTarget, stdout: TextIO = None) -> List[str]:
        """
        Generate code for the tables and write it to the target.

        Args:
            tables: Catalog tables
            target: Resolved output destination
            stdout: Stream used for 'stdout' output (defaults to sys.stdout)

        Returns:
            Paths written ('stdout' for standard output)

        Raises:
            OrchestratorError: If code generation or a file write fails
        """
        try:
            if target.is_stdout:
                (stdout or sys.stdout).write(self.emitter.module_source(tables))
                return [STDOUT]

            if not target.file_per_table:
                path = target.path
                self._write_file(path, self.emitter.module_source(tables))
                return [str(path)]

            written = []
            filenames = table_filenames(tables)
            for table in tables:
                path = Path(target.directory) / filenames[table.name]
                self._write_file(path, self.emitter.table_source(table))
                written.append(str(path))
            return written

        except CodegenError as e:
            raise OrchestratorError(f"Code generation failed: {e}")

    def _write_file(self, path: Path, source: str) -> None:
        try:
            with open(path, 'w', encoding='utf-8') as f:
                f.write(source)
        except OSError as e:
            logger.error(f"❌ Failed to write {path}: {e}")
            raise OrchestratorError(f"Failed to write {path}: {e}")
        logger.debug(f"Wrote {path}")

    def run(self, target: OutputTarget) -> Dict[str, Any]:
        """
        Run the full generation: verify, read, emit, write.

        Returns:
            Summary with the number of tables and the paths written
        """
        self.verify_prerequisites()
        tables = self.read_catalog()
        if not tables:
            logger.warning(f"⚠️  No tables found in {self.database}")

        files = self.write(tables, target)
        return {'tables': len(tables), 'files': files}


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser; defaults come from core.config."""
    parser = argparse.ArgumentParser(
        prog='table-codegen',
        description="Creates Python dataclasses with basic CRUD SQL from a database's tables.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate inventory.py in the current directory
  table-codegen --rdbms mysql --db inventory -u codegen -p secret

  # One module per table under models/
  table-codegen --rdbms postgres --db inventory -u codegen -p secret --out models --separate-files

  # Print to stdout
  table-codegen --rdbms mysql --db inventory -u codegen -p secret --out stdout

Settings may also come from CODEGEN_* environment variables or a .env file.
        """
    )

    parser.add_argument('--rdbms', default=config.rdbms, help='the target RDBMS (mysql, postgres)')
    parser.add_argument('--db', default=config.db_name, help='database name')
    parser.add_argument('-u', '--user', default=config.db_user, help='login user')
    parser.add_argument('-p', '--password', default=config.db_password, help="user's password")
    parser.add_argument('--server', default=config.db_host, help='server location')
    parser.add_argument('--port', type=int, default=config.db_port, help='server port; defaults to the RDBMS default')
    parser.add_argument('--schema', default=config.db_schema, help='schema to read; defaults to the connection default')
    parser.add_argument(
        '--package',
        default=config.output.package,
        help='name of the package the generated code is part of; if empty, the database name is used'
    )
    parser.add_argument(
        '--out',
        default=config.output.out,
        help="output destination: a .py file, a directory, or 'stdout'; if empty, the working directory"
    )
    parser.add_argument(
        '--separate-files',
        action='store_true',
        default=config.output.file_per_table,
        help="use a file per table; each file uses the table's name"
    )
    parser.add_argument(
        '--placeholder',
        default=config.output.placeholder,
        help="positional placeholder in emitted SQL; defaults to the driver's ('%%s')"
    )
    parser.add_argument('--verbose', action='store_true', help='Enable verbose logging (DEBUG level)')
    parser.add_argument('--log-file', default=None, help='also write log records to this file')
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Command-line entry point.

    Exit Codes:
        0: Success
        1: Error
        2: Usage error
        130: User interrupt (Ctrl+C)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    # Set logging level
    level_name = 'DEBUG' if args.verbose else config.output.log_level
    try:
        if args.log_file:
            setup_logging(log_level=level_name, log_file=args.log_file)
        else:
            set_log_level(level_name)
    except ValueError as e:
        logger.error(f"❌ {e}")
        return 2

    missing = [flag for flag, value in (('--rdbms', args.rdbms), ('--db', args.db), ('--user', args.user)) if not value]
    if missing:
        parser.print_usage(sys.stderr)
        logger.error(f"❌ A value for {', '.join(missing)} must be specified")
        return 2

    try:
        db_type = parse_db_type(args.rdbms)
    except UnsupportedDBError as e:
        logger.error(f"❌ {e}")
        return 2

    try:
        target = resolve_output(args.out, args.db, args.separate_files)
        orchestrator = CodegenOrchestrator(
            db_type=db_type,
            host=args.server,
            port=args.port,
            user=args.user,
            password=args.password,
            database=args.db,
            schema=args.schema,
            package=args.package,
            placeholder=args.placeholder
        )
        result = orchestrator.run(target)

        destination = STDOUT if target.is_stdout else (
            target.directory if target.file_per_table else str(target.path)
        )
        logger.info(f"🎉 Dataclasses for {result['tables']} tables in {args.db} were written to {destination!r}")
        return 0

    except OrchestratorError as e:
        logger.error(f"❌ Code generation failed: {e}")
        return 1
    except KeyboardInterrupt:
        logger.warning("⚠️  Operation interrupted by user")
        return 130


def cli() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == '__main__':
    cli()
