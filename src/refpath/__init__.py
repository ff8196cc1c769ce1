"""refpath: validated path and string refinement types.

Every type is built by a factory returning Result: Ok with a value that
satisfies its invariant, or Err with a PathError describing the first
failed check. Nothing is raised for invalid input.

Flat imports (preferred):
    from refpath import AbsolutePath, RelativePath, FileName, Ok, Err
    from refpath import SomeString, create_string

Submodule imports (for organization):
    from refpath.paths import AbsoluteDirectoryPath, ExistingDirectoryPath
    from refpath.strings import Empty, WhitespaceString
    from refpath.result import Result, sequence
    from refpath.platform import POSIX, WINDOWS
"""

from refpath._config import PathConfig, default_policy, get_config, init
from refpath._logging import add_log_hook, clear_log_hooks, configure_logging, get_logger, remove_log_hook

# Assertions
from refpath.assertions import assert_result, fail_if

# Decorators
from refpath.decorators import result, safe

# Errors
from refpath.errors import (
    ErrorInfo,
    ErrorKind,
    InvalidCharacterError,
    IoFailureError,
    IsRootedError,
    NoDirectoryOrFileSegmentError,
    NotFoundError,
    NotRootedError,
    NullOrEmptyInputError,
    PathError,
    SneakyTraversalError,
    TrailingPeriodOrSpaceError,
    WhitespaceOnlyInputError,
    WrongKindError,
)

# Paths
from refpath.paths import (
    AbsoluteDirectoryPath,
    AbsoluteFilePath,
    AbsolutePath,
    AnyPath,
    EmptyPath,
    ExistingDirectoryPath,
    ExistingFilePath,
    FileName,
    NonEmptyPath,
    NonEmptyPathString,
    NonSneakyPath,
    NoPath,
    RelativeDirectoryPath,
    RelativeFilePath,
    RelativePath,
    bind_existing,
    bind_existing_file,
    bind_existing_or_created,
    create_path,
    get_directory,
    is_sneaky,
)

# Platform
from refpath.platform import POSIX, WINDOWS, PathPolicy, Platform, host_policy, policy_for
from refpath.propagate import Propagate
from refpath.result import Err, Ok, Result, partition_results, sequence, traverse

# Strings
from refpath.strings import AnyString, Empty, EmptyString, NonEmptyString, SomeString, WhitespaceString, create_string

__all__ = [
    # Paths
    'AbsoluteDirectoryPath',
    'AbsoluteFilePath',
    'AbsolutePath',
    'AnyPath',
    # Strings
    'AnyString',
    'Empty',
    'EmptyPath',
    'EmptyString',
    # Result types
    'Err',
    # Errors
    'ErrorInfo',
    'ErrorKind',
    'ExistingDirectoryPath',
    'ExistingFilePath',
    'FileName',
    'InvalidCharacterError',
    'IoFailureError',
    'IsRootedError',
    'NoDirectoryOrFileSegmentError',
    'NonEmptyPath',
    'NonEmptyPathString',
    'NonEmptyString',
    'NoPath',
    'NonSneakyPath',
    'NotFoundError',
    'NotRootedError',
    'NullOrEmptyInputError',
    'Ok',
    # Platform
    'POSIX',
    # Configuration
    'PathConfig',
    'PathError',
    'PathPolicy',
    'Platform',
    # Propagation
    'Propagate',
    'RelativeDirectoryPath',
    'RelativeFilePath',
    'RelativePath',
    'Result',
    'SneakyTraversalError',
    'SomeString',
    'TrailingPeriodOrSpaceError',
    'WINDOWS',
    'WhitespaceOnlyInputError',
    'WhitespaceString',
    'WrongKindError',
    # Logging
    'add_log_hook',
    # Assertions
    'assert_result',
    'bind_existing',
    'bind_existing_file',
    'bind_existing_or_created',
    'clear_log_hooks',
    'configure_logging',
    'create_path',
    'create_string',
    'default_policy',
    'fail_if',
    'get_config',
    'get_directory',
    'get_logger',
    'host_policy',
    'init',
    'is_sneaky',
    'partition_results',
    'policy_for',
    'remove_log_hook',
    # Decorators
    'result',
    'safe',
    'sequence',
    'traverse',
]
