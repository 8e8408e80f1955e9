"""
A trie (prefix tree) over lowercase words whose nodes change shape as
words are inserted.

A node is one of three variants:

    TrieWithNoChildren    no outgoing edges (shared, immutable)
    TrieWithOneChild      exactly one outgoing edge
    TrieWithManyChildren  two or more outgoing edges, keyed by letter

Inserting into a node may return a different node than the one it was
called on (a leaf becomes a chain, a chain becomes a branch), so callers
must always keep the returned node as the new root of that subtree.
"""

import logging
import string
from abc import ABC, abstractmethod
from typing import Iterable, Iterator, List, Optional

logger = logging.getLogger(__name__)

ALPHABET = string.ascii_lowercase


class InvalidArgument(ValueError):
    """Raised when a string cannot be stored in the trie."""


def _check_first_letter(s: str) -> None:
    if s == "":
        logger.debug("rejecting empty string where a first letter is required")
        raise InvalidArgument("expected a non-empty string")
    if s[0] not in ALPHABET:
        logger.debug("rejecting %r: %r is not a lowercase letter", s, s[0])
        raise InvalidArgument(
            f"{s!r} contains {s[0]!r}; only the letters 'a'-'z' are allowed"
        )


class TrieNode(ABC):
    """
    The set of suffixes reachable from one point in the trie.

    Attributes:
        marks_end_of_string (bool):
            True if the empty suffix is a member here, i.e. the string
            spelled by the path to this node was inserted.
    """
    __slots__ = ()

    marks_end_of_string = False

    @abstractmethod
    def insert(self, s: str) -> "TrieNode":
        """
        Add a string to the trie rooted at this node.

        Args:
            s (str): The string to add. May be empty.

        Returns:
            TrieNode: The resulting trie. This may be a new node replacing
            the receiver, so the caller must keep it instead of ``self``.

        Raises:
            InvalidArgument: If ``s`` contains a character outside 'a'-'z'.
                The trie is left unchanged.
        """

    @abstractmethod
    def contains(self, s: str) -> bool:
        """Return True if ``s`` was inserted into the trie rooted here."""

    @abstractmethod
    def get_completions(self, prefix: str) -> Optional["TrieNode"]:
        """
        Find the subtree holding every completion of ``prefix``.

        Args:
            prefix (str): The prefix to follow, edge by edge.

        Returns:
            Optional[TrieNode]: The node reached by following ``prefix``,
            whose stored strings are the suffixes that complete ``prefix``
            into stored words, or None if no stored word has that prefix.
        """

    @abstractmethod
    def collect_sorted(self, prefix: List[str], into: List[str]) -> None:
        """
        Append every string in this trie, in ascending order, to ``into``.

        Args:
            prefix (list[str]): Letters spelled so far. Each string is
                appended as ``"".join(prefix) + string``. The list is
                mutated during the walk and restored before returning.
            into (list[str]): The list to append to.
        """


class TrieWithNoChildren(TrieNode):
    """
    A node with no outgoing edges.

    Leaves never change, so only two exist: ``EMPTY`` stores nothing and
    ``END`` stores just the empty string.
    """
    __slots__ = ("_marks_end",)

    EMPTY: "TrieWithNoChildren"
    END: "TrieWithNoChildren"

    def __init__(self, marks_end_of_string: bool = False):
        self._marks_end = marks_end_of_string

    @property
    def marks_end_of_string(self) -> bool:
        return self._marks_end

    def insert(self, s: str) -> TrieNode:
        if s == "":
            return TrieWithNoChildren.END
        return TrieWithOneChild(s, self._marks_end)

    def contains(self, s: str) -> bool:
        return s == "" and self._marks_end

    def get_completions(self, prefix: str) -> Optional[TrieNode]:
        if prefix == "":
            return self
        return None

    def collect_sorted(self, prefix: List[str], into: List[str]) -> None:
        if self._marks_end:
            into.append("".join(prefix))

    def __repr__(self):
        return "TrieWithNoChildren.END" if self._marks_end else "TrieWithNoChildren.EMPTY"


TrieWithNoChildren.EMPTY = TrieWithNoChildren(False)
TrieWithNoChildren.END = TrieWithNoChildren(True)


class TrieWithOneChild(TrieNode):
    """
    A node with exactly one outgoing edge.

    Attributes:
        marks_end_of_string (bool): Whether the empty string is stored here.
        label (str): The letter on the only edge.
        child (TrieNode): The subtree at the end of that edge.
    """
    __slots__ = ("marks_end_of_string", "label", "child")

    def __init__(self, s: str, marks_end_of_string: bool):
        """
        Build a trie holding ``s`` and, if ``marks_end_of_string`` is set,
        the empty string.

        Raises:
            InvalidArgument: If ``s`` is empty or contains a character
                outside 'a'-'z'.
        """
        _check_first_letter(s)
        self.marks_end_of_string = marks_end_of_string
        self.label = s[0]
        self.child = TrieWithNoChildren.EMPTY.insert(s[1:])

    def insert(self, s: str) -> TrieNode:
        if s == "":
            self.marks_end_of_string = True
            return self
        if s[0] == self.label:
            self.child = self.child.insert(s[1:])
            return self
        branch = TrieWithManyChildren(s, self.marks_end_of_string, self.label, self.child)
        logger.debug("upgraded chain %r to branch on %r", self.label, s[0])
        return branch

    def contains(self, s: str) -> bool:
        if s == "":
            return self.marks_end_of_string
        if s[0] == self.label:
            return self.child.contains(s[1:])
        return False

    def get_completions(self, prefix: str) -> Optional[TrieNode]:
        if prefix == "":
            return self
        if prefix[0] == self.label:
            return self.child.get_completions(prefix[1:])
        return None

    def collect_sorted(self, prefix: List[str], into: List[str]) -> None:
        if self.marks_end_of_string:
            into.append("".join(prefix))
        prefix.append(self.label)
        try:
            self.child.collect_sorted(prefix, into)
        finally:
            prefix.pop()

    def __repr__(self):
        return f"TrieWithOneChild(label={self.label!r}, marks_end_of_string={self.marks_end_of_string})"


class TrieWithManyChildren(TrieNode):
    """
    A node with two or more outgoing edges.

    Attributes:
        marks_end_of_string (bool): Whether the empty string is stored here.
        children (dict[str, TrieNode]): Mapping from a letter to the
            subtree at the end of that edge.
    """
    __slots__ = ("marks_end_of_string", "children")

    def __init__(self, s: str, marks_end_of_string: bool, label: str, child: TrieNode):
        """
        Build a trie holding ``s``, the strings of ``child`` prefixed by
        ``label``, and, if ``marks_end_of_string`` is set, the empty string.

        Raises:
            InvalidArgument: If ``s`` is empty, contains a character outside
                'a'-'z', or starts with ``label``.
        """
        _check_first_letter(s)
        if s[0] == label:
            raise InvalidArgument(f"{s!r} starts with the existing label {label!r}")
        self.marks_end_of_string = marks_end_of_string
        self.children = {
            label: child,
            s[0]: TrieWithNoChildren.EMPTY.insert(s[1:]),
        }

    def insert(self, s: str) -> TrieNode:
        if s == "":
            self.marks_end_of_string = True
            return self
        child = self.children.get(s[0])
        if child is None:
            _check_first_letter(s)
            # the new subtree is fully built before it is attached
            self.children[s[0]] = TrieWithNoChildren.EMPTY.insert(s[1:])
        else:
            self.children[s[0]] = child.insert(s[1:])
        return self

    def contains(self, s: str) -> bool:
        if s == "":
            return self.marks_end_of_string
        child = self.children.get(s[0])
        if child is None:
            return False
        return child.contains(s[1:])

    def get_completions(self, prefix: str) -> Optional[TrieNode]:
        if prefix == "":
            return self
        child = self.children.get(prefix[0])
        if child is None:
            return None
        return child.get_completions(prefix[1:])

    def collect_sorted(self, prefix: List[str], into: List[str]) -> None:
        if self.marks_end_of_string:
            into.append("".join(prefix))
        for letter in sorted(self.children):
            prefix.append(letter)
            try:
                self.children[letter].collect_sorted(prefix, into)
            finally:
                prefix.pop()

    def __repr__(self):
        return (
            f"TrieWithManyChildren(labels={''.join(sorted(self.children))!r}, "
            f"marks_end_of_string={self.marks_end_of_string})"
        )


# -------------------------------------------------------------
# Operations on a root node
# -------------------------------------------------------------

def insert(root: Optional[TrieNode], s: str) -> TrieNode:
    """
    Insert a string into the trie rooted at ``root``.

    Args:
        root (TrieNode | None): The current root; None is the empty trie.
        s (str): The string to insert. May be empty.

    Returns:
        TrieNode: The new root, which replaces ``root``.

    Raises:
        InvalidArgument: If ``s`` contains a character outside 'a'-'z'.
    """
    if root is None:
        root = TrieWithNoChildren.EMPTY
    return root.insert(s)


def contains(root: Optional[TrieNode], s: str) -> bool:
    """Return True if ``s`` was inserted into the trie rooted at ``root``."""
    if root is None:
        return False
    return root.contains(s)


def get_completions_subtree(root: Optional[TrieNode], prefix: str) -> Optional[TrieNode]:
    """
    Return the subtree of strings completing ``prefix``, or None if no
    stored string starts with ``prefix``.
    """
    if root is None:
        return None
    return root.get_completions(prefix)


def collect_sorted(root: Optional[TrieNode]) -> List[str]:
    """Return every stored string in ascending order."""
    words: List[str] = []
    if root is not None:
        root.collect_sorted([], words)
    return words


class Trie:
    """
    A set of lowercase words backed by a shape-changing trie.

    Keeps the root node and swaps it for whatever ``insert`` returns.
    """

    def __init__(self, words: Optional[Iterable[str]] = None):
        """
        Initialize a trie, optionally filled with ``words``.

        Raises:
            InvalidArgument: If any word contains a character outside 'a'-'z'.
        """
        self.root: TrieNode = TrieWithNoChildren.EMPTY
        if words is not None:
            for word in words:
                self.insert(word)

    # -------------------------------------------------------------
    # Core Operations
    # -------------------------------------------------------------

    def insert(self, word: str) -> None:
        """
        Insert a word into the trie.

        Args:
            word (str): The word to insert.

        Raises:
            InvalidArgument: If ``word`` contains a character outside
                'a'-'z'. The trie is left unchanged.
        """
        self.root = insert(self.root, word)

    def search(self, word: str) -> bool:
        """
        Determine whether a word exists in the trie.

        Args:
            word (str): The word to search for.

        Returns:
            bool: True if the word exists, False otherwise.
        """
        return contains(self.root, word)

    def starts_with(self, prefix: str) -> bool:
        """
        Check if any word in the trie begins with the given prefix.

        Args:
            prefix (str): The prefix to test.

        Returns:
            bool: True if at least one word begins with the prefix.
        """
        subtree = get_completions_subtree(self.root, prefix)
        # only the empty trie is reachable yet stores nothing
        return subtree is not None and subtree is not TrieWithNoChildren.EMPTY

    def get_completions(self, prefix: str) -> Optional[TrieNode]:
        """Return the subtree of completions of ``prefix``, or None."""
        return get_completions_subtree(self.root, prefix)

    def collect_sorted(self) -> List[str]:
        """Return every stored word in ascending order."""
        return collect_sorted(self.root)

    # -------------------------------------------------------------
    # Additional Functionalities
    # -------------------------------------------------------------

    def words_with_prefix(self, prefix: str) -> List[str]:
        """
        Retrieve all words in the trie that share a given prefix.

        Args:
            prefix (str): The prefix to match.

        Returns:
            list[str]: All words that begin with the prefix, sorted.
        """
        subtree = get_completions_subtree(self.root, prefix)
        if subtree is None:
            return []
        result: List[str] = []
        subtree.collect_sorted(list(prefix), result)
        return result

    def __contains__(self, word) -> bool:
        return isinstance(word, str) and self.search(word)

    def __iter__(self) -> Iterator[str]:
        return iter(self.collect_sorted())

    def __len__(self) -> int:
        return len(self.collect_sorted())

    def __bool__(self) -> bool:
        return self.root is not TrieWithNoChildren.EMPTY

    def __repr__(self):
        return f"Trie({self.collect_sorted()!r})"
