"""Exception classes for Sapling.

Edits driven by keystrokes fail often and legitimately (deleting the last
required child, inserting into a leaf). Those failures are raised as typed,
recoverable exceptions carrying the violated bound, and the node they were
raised from is always left exactly as it was.

Hierarchy:
SaplingError
├── InsertError
│   ├── TooManyChildren
│   └── IndexOutOfRange (also a DeleteError)
├── DeleteError
│   ├── TooFewChildren
│   └── IndexOutOfRange
├── ForeignRefError
└── ContractViolation

"""

from __future__ import annotations


class SaplingError(Exception):
    """Base exception for all Sapling errors.

    Subclasses describe themselves through ``_fields`` so that two errors of
    the same class with the same values compare equal.
    """

    _fields: tuple[str, ...] = ()

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return all(getattr(self, f) == getattr(other, f) for f in self._fields)

    def __hash__(self) -> int:
        return hash((type(self).__name__, *(getattr(self, f) for f in self._fields)))


class InsertError(SaplingError):
    """An insertion was rejected.

    Raised by ``Ast.insert_child``. The node and its arena are unchanged.
    """


class DeleteError(SaplingError):
    """A deletion was rejected.

    Raised by ``Ast.delete_child``. The node is unchanged.
    """


class TooManyChildren(InsertError):
    """Inserting would exceed the node type's child count limit."""

    _fields = ("name", "max_children")

    def __init__(self, name: str, max_children: int) -> None:
        """Initialize with the offending node and its ceiling.

        Args:
            name: Display name of the node that rejected the insert
            max_children: The node type's maximum child count
        """
        self.name = name
        self.max_children = max_children
        super().__init__(f"Can't exceed child count limit of {max_children} in {name}")


class TooFewChildren(DeleteError):
    """Deleting would leave the node with fewer children than it requires."""

    _fields = ("name", "min_children")

    def __init__(self, name: str, min_children: int) -> None:
        """Initialize with the offending node and its floor.

        Args:
            name: Display name of the node that rejected the delete
            min_children: The node type's minimum child count
        """
        self.name = name
        self.min_children = min_children
        super().__init__(f"Node type {name} can't have fewer than {min_children} children.")


class IndexOutOfRange(DeleteError, InsertError):
    """The requested child position doesn't exist.

    Callers are not expected to produce one (it would need a cursor on a
    non-existent node), but mutation entry points never crash on it.
    """

    _fields = ("len", "index")

    def __init__(self, length: int, index: int, action: str = "Deleting") -> None:
        """Initialize with the child count and the rejected position.

        Args:
            length: Number of children the node had
            index: The requested position
            action: Verb used in the message ("Deleting" or "Inserting")
        """
        self.len = length
        self.index = index
        super().__init__(f"{action} child index {index} is out of range 0..{length}")


class ForeignRefError(SaplingError, LookupError):
    """A Ref was resolved through an arena that did not issue it."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class ContractViolation(SaplingError, AssertionError):
    """A node implementation broke an invariant of the node contract.

    Signals a bug in a grammar (for example an unbalanced Dedent in its
    token stream), never bad user input.
    """

    pass
