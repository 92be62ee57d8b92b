"""Function Catalog — flattens declared function names out of remote script files.

Invariants:
    - Pure function: no IO, no async
    - File order, then declaration order within a file, is preserved
    - Duplicate names across files are kept (len == sum of per-file counts)
    - Files without functionSet, or with functionSet but no values, contribute nothing
"""

from collections.abc import Iterable

from scriptops.core.domain_types import FunctionCatalog
from scriptops.schemas.script_content import FileContent


def build_function_catalog(files: Iterable[FileContent] | None) -> FunctionCatalog:
    """Concatenate the function names of every file that declares any."""
    catalog: FunctionCatalog = []
    for file in files or []:
        if file.function_set and file.function_set.values:
            catalog.extend(func.name for func in file.function_set.values)
    return catalog
