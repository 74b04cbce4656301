"""Key path extraction over nested translation documents."""

from typing import Any, Iterator, List, Mapping, Optional, Set, Tuple

KEY_SEPARATOR = "."


def iter_leaves(document: Mapping[str, Any], separator: str = KEY_SEPARATOR) -> Iterator[Tuple[str, Any]]:
    """Yield ``(key_path, value)`` for every leaf of a translation document.

    Nested mappings are walked depth-first; anything else (strings, numbers,
    booleans, None and lists) is a leaf. An explicit stack is used so deep
    documents are not bounded by the interpreter's recursion limit.

    Args:
        document: Translation document
        separator: String used to join nested keys

    Yields:
        Key path and leaf value pairs, in document order
    """
    stack: List[Tuple[Optional[str], Iterator[Tuple[Any, Any]]]] = [(None, iter(document.items()))]
    while stack:
        prefix, items = stack[-1]
        try:
            key, value = next(items)
        except StopIteration:
            stack.pop()
            continue

        full_key = str(key) if prefix is None else f"{prefix}{separator}{key}"
        if isinstance(value, Mapping):
            stack.append((full_key, iter(value.items())))
        else:
            yield full_key, value


def extract_keys(document: Mapping[str, Any], separator: str = KEY_SEPARATOR) -> Set[str]:
    """Get the set of key paths for every leaf in the document.

    An empty document (or an empty nested section) contributes no keys.
    """
    return {key for key, _ in iter_leaves(document, separator)}


def resolve_key_path(document: Mapping[str, Any], key_path: str, separator: str = KEY_SEPARATOR) -> Any:
    """Walk a key path back to its value.

    Raises:
        KeyError: If any segment of the path is missing
    """
    value: Any = document
    for part in key_path.split(separator):
        if not isinstance(value, Mapping) or part not in value:
            raise KeyError(key_path)
        value = value[part]
    return value
