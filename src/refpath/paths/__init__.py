"""The path refinement ladder.

AnyPath
├── EmptyPath (the NoPath marker)
└── NonEmptyPath
    └── NonSneakyPath
        ├── AbsolutePath
        │   ├── AbsoluteDirectoryPath ── ExistingDirectoryPath
        │   └── AbsoluteFilePath ─────── ExistingFilePath
        └── RelativePath
            ├── RelativeDirectoryPath
            └── RelativeFilePath
"""

from refpath.paths._pathstring import NonEmptyPathString
from refpath.paths._sneaky import is_sneaky
from refpath.paths.absolute import AbsoluteDirectoryPath, AbsoluteFilePath, AbsolutePath, get_directory
from refpath.paths.base import AnyPath, EmptyPath, NonEmptyPath, NonSneakyPath, NoPath, create_path
from refpath.paths.existing import (
    ExistingDirectoryPath,
    ExistingFilePath,
    bind_existing,
    bind_existing_file,
    bind_existing_or_created,
)
from refpath.paths.filename import FileName
from refpath.paths.relative import RelativeDirectoryPath, RelativeFilePath, RelativePath

__all__ = [
    'AbsoluteDirectoryPath',
    'AbsoluteFilePath',
    'AbsolutePath',
    'AnyPath',
    'EmptyPath',
    'ExistingDirectoryPath',
    'ExistingFilePath',
    'FileName',
    'NoPath',
    'NonEmptyPath',
    'NonEmptyPathString',
    'NonSneakyPath',
    'RelativeDirectoryPath',
    'RelativeFilePath',
    'RelativePath',
    'bind_existing',
    'bind_existing_file',
    'bind_existing_or_created',
    'create_path',
    'get_directory',
    'is_sneaky',
]
